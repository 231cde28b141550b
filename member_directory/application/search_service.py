"""Application layer orchestrator for directory search workflows following hexagonal architecture."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from member_directory.application.result_hydrator import HydratedProfile, ResultHydrator
from member_directory.core.config import MAX_SEARCH_RESULTS
from member_directory.domain.entities.profile import Profile
from member_directory.domain.entities.search_history import SearchFilters
from member_directory.domain.exceptions import ValidationError
from member_directory.domain.services.text_relevance import matches_filters

if TYPE_CHECKING:
    from member_directory.application.dependencies.search_dependencies import SearchDependencies


logger = structlog.get_logger(__name__)


class SearchApplicationService:
    """Coordinates directory search across the profile and user stores.

    This application service follows hexagonal architecture principles by:
    - Using dependency injection via constructor
    - Depending only on domain interfaces (ports)
    - Orchestrating workflow without implementing business logic
    """

    def __init__(self, dependencies: SearchDependencies) -> None:
        """Initialize with injected dependencies.

        Args:
            dependencies: Profile and user repositories plus the result cap
        """
        self._deps = dependencies
        self._hydrator = ResultHydrator(dependencies.user_repository)
        self._logger = structlog.get_logger(__name__)

    @property
    def max_results(self) -> int:
        return max(1, min(self._deps.max_results, MAX_SEARCH_RESULTS))

    async def search_profiles(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
        country: Optional[str] = None,
        verified_only: bool = False,
    ) -> List[HydratedProfile]:
        """Search approved profiles and hydrate each hit with its owner.

        Args:
            query: Free text; empty or None lists every approved profile
            category: Exact category match
            location: Exact location match
            country: Exact country match
            verified_only: Keep only profiles holding a verification badge

        Returns:
            Hydrated profiles in relevance order, at most ``max_results``

        Raises:
            ValidationError: If a filter is not a string
            StoreUnavailableError: If the profile store cannot be reached
        """
        if query is not None and not isinstance(query, str):
            raise ValidationError("Search query must be a string")

        filters = SearchFilters.from_mapping(
            {
                "category": category,
                "location": location,
                "country": country,
                "verified_only": verified_only,
            }
        )
        text = (query or "").strip()

        self._logger.debug(
            "Executing directory search",
            query=text,
            filters=filters.to_dict(),
            limit=self.max_results,
        )

        profiles = await self._deps.profile_repository.search_by_text(
            text,
            filters,
            limit=self.max_results,
        )
        matched = self._enforce_constraints(profiles, filters)

        results = await self._hydrator.hydrate(matched)

        self._logger.info(
            "Directory search completed",
            query=text,
            result_count=len(results),
            unresolved_users=sum(1 for item in results if item.user is None),
        )

        return results

    def _enforce_constraints(
        self,
        profiles: List[Profile],
        filters: SearchFilters,
    ) -> List[Profile]:
        """Re-check approval and filters on store output and apply the cap."""
        accepted = [profile for profile in profiles if matches_filters(profile, filters)]

        dropped = len(profiles) - len(accepted)
        if dropped:
            self._logger.warning(
                "Profile store returned records outside the search constraints",
                dropped=dropped,
            )

        return accepted[: self.max_results]

    async def list_locations(self) -> List[str]:
        """Distinct locations of approved profiles, sorted."""
        profiles = await self._deps.profile_repository.scan_approved()
        return self._distinct_values(profiles, "location")

    async def list_countries(self) -> List[str]:
        """Distinct countries of approved profiles, sorted."""
        profiles = await self._deps.profile_repository.scan_approved()
        return self._distinct_values(profiles, "country")

    @staticmethod
    def _distinct_values(profiles: List[Profile], field_name: str) -> List[str]:
        values = set()
        for profile in profiles:
            if not profile.is_approved:
                continue
            value = profile.field_text(field_name)
            if value and value.strip():
                values.add(value.strip())
        return sorted(values)


__all__ = ["SearchApplicationService"]
