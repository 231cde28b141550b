"""
Search API Schemas

Request/response models for the member directory search endpoints:
- Ranked profile results joined with the owning member
- Autocomplete suggestions and location facets
- Per-user search history
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from member_directory.application.result_hydrator import HydratedProfile
from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.entities.user import User


class SearchFiltersModel(BaseModel):
    """Filters applied to a search."""

    model_config = ConfigDict(extra="forbid")

    category: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    verified_only: bool = False

    @classmethod
    def from_domain(cls, filters: SearchFilters) -> "SearchFiltersModel":
        return cls(**filters.to_dict())


class VerificationBadgesResponse(BaseModel):
    email_verified: bool = False
    phone_verified: bool = False
    pastor_endorsed: bool = False
    background_check: bool = False


class MemberSummary(BaseModel):
    """Display projection of the user owning a profile."""

    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    is_online: bool = False
    last_seen: Optional[datetime] = None
    denomination: Optional[str] = None
    denomination_name: Optional[str] = None
    branch_name: Optional[str] = None
    branch_location: Optional[str] = None
    pastor: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "MemberSummary":
        affiliation = user.affiliation
        return cls(
            id=user.id.value,
            name=user.name,
            email=user.email,
            phone=user.phone,
            is_online=user.is_online,
            last_seen=user.last_seen,
            denomination=affiliation.denomination,
            denomination_name=affiliation.denomination_name,
            branch_name=affiliation.branch_name,
            branch_location=affiliation.branch_location,
            pastor=affiliation.pastor,
        )


class ProfileSearchResult(BaseModel):
    """Approved profile merged with its owner; ``user`` is null when unresolved."""

    id: UUID
    user_id: UUID
    name: str
    profession: Optional[str] = None
    skills: Optional[str] = None
    category: Optional[str] = None
    experience: Optional[str] = None
    services_offered: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    church: Optional[str] = None
    denomination: Optional[str] = None
    profile_picture: Optional[str] = None
    verification_badges: VerificationBadgesResponse
    updated_at: datetime
    user: Optional[MemberSummary] = None

    @classmethod
    def from_hydrated(cls, item: HydratedProfile) -> "ProfileSearchResult":
        profile = item.profile
        badges = profile.badges
        return cls(
            id=profile.id.value,
            user_id=profile.user_id.value,
            name=profile.name,
            profession=profile.profession,
            skills=profile.skills,
            category=profile.category,
            experience=profile.experience,
            services_offered=profile.services_offered,
            location=profile.location,
            country=profile.country,
            church=profile.church,
            denomination=profile.denomination,
            profile_picture=profile.profile_picture,
            verification_badges=VerificationBadgesResponse(
                email_verified=badges.email_verified,
                phone_verified=badges.phone_verified,
                pastor_endorsed=badges.pastor_endorsed,
                background_check=badges.background_check,
            ),
            updated_at=profile.updated_at,
            user=MemberSummary.from_domain(item.user) if item.user else None,
        )


class ProfileSearchResponse(BaseModel):
    query: str
    filters: SearchFiltersModel
    total_count: int
    results: List[ProfileSearchResult]


class SuggestionResponse(BaseModel):
    query: str
    suggestions: List[str]


class FacetValuesResponse(BaseModel):
    values: List[str]


class SearchHistoryCreate(BaseModel):
    """Payload for recording an executed search."""

    model_config = ConfigDict(extra="forbid")

    user_id: UUID
    query: str = Field(..., max_length=500)
    filters: SearchFiltersModel = Field(default_factory=SearchFiltersModel)


class SearchHistoryResponse(BaseModel):
    id: UUID
    user_id: UUID
    query: str
    filters: SearchFiltersModel
    timestamp: datetime

    @classmethod
    def from_domain(cls, entry: SearchHistoryEntry) -> "SearchHistoryResponse":
        return cls(
            id=entry.id.value,
            user_id=entry.user_id.value,
            query=entry.query,
            filters=SearchFiltersModel.from_domain(entry.filters),
            timestamp=entry.timestamp,
        )


__all__ = [
    "FacetValuesResponse",
    "MemberSummary",
    "ProfileSearchResponse",
    "ProfileSearchResult",
    "SearchFiltersModel",
    "SearchHistoryCreate",
    "SearchHistoryResponse",
    "SuggestionResponse",
    "VerificationBadgesResponse",
]
