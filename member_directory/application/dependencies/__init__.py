"""Dependency containers for application services."""

from member_directory.application.dependencies.search_dependencies import (
    ISearchDependencyFactory,
    SearchDependencies,
)
from member_directory.application.dependencies.search_history_dependencies import (
    ISearchHistoryDependencyFactory,
    SearchHistoryDependencies,
)
from member_directory.application.dependencies.suggestion_dependencies import (
    ISuggestionDependencyFactory,
    SuggestionDependencies,
)

__all__ = [
    "ISearchDependencyFactory",
    "ISearchHistoryDependencyFactory",
    "ISuggestionDependencyFactory",
    "SearchDependencies",
    "SearchHistoryDependencies",
    "SuggestionDependencies",
]
