"""Concrete dependency factories wiring providers into application services."""

from member_directory.infrastructure.factories.search_dependency_factory import (
    get_search_dependencies,
)
from member_directory.infrastructure.factories.search_history_dependency_factory import (
    get_search_history_dependencies,
)
from member_directory.infrastructure.factories.suggestion_dependency_factory import (
    get_suggestion_dependencies,
)

__all__ = [
    "get_search_dependencies",
    "get_search_history_dependencies",
    "get_suggestion_dependencies",
]
