"""Unit tests for the persistence mappers."""

from datetime import datetime
from uuid import uuid4

import pytest
from hypothesis import given, strategies as st

from member_directory.domain.entities.profile import ProfileStatus, VerificationBadges
from member_directory.domain.entities.search_history import SearchFilters, SearchHistoryEntry
from member_directory.domain.entities.user import UserRole
from member_directory.domain.value_objects import UserId
from member_directory.infrastructure.persistence.mappers import (
    ProfileMapper,
    SearchHistoryMapper,
    UserMapper,
)
from member_directory.infrastructure.persistence.models import (
    ProfileTable,
    SearchHistoryTable,
    UserTable,
)


class TestProfileMapper:
    def test_badges_flatten_into_columns(self, make_profile):
        profile = make_profile(
            profession="Nurse",
            badges=VerificationBadges(email_verified=True, background_check=True),
        )

        row = ProfileMapper.to_table(profile)

        assert row.status == "approved"
        assert row.email_verified is True
        assert row.phone_verified is False
        assert row.background_check is True

    def test_row_maps_back_to_equal_entity(self, make_profile):
        profile = make_profile(
            profession="Teacher",
            skills="Maths",
            category="education",
            location="Lagos",
            country="Nigeria",
            status=ProfileStatus.PENDING,
            badges=VerificationBadges(pastor_endorsed=True),
        )

        assert ProfileMapper.to_domain(ProfileMapper.to_table(profile)) == profile

    def test_unknown_status_is_rejected(self):
        row = ProfileTable(
            id=uuid4(),
            user_id=uuid4(),
            name="Member",
            status="archived",
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 1),
        )
        with pytest.raises(ValueError):
            ProfileMapper.to_domain(row)


class TestUserMapper:
    def test_affiliation_columns_map_to_value_object(self):
        row = UserTable(
            id=uuid4(),
            name="Grace",
            email="grace@example.org",
            role="admin",
            denomination="Methodist",
            branch_name="North",
            pastor="Rev. Obi",
            account_approved=True,
            created_at=datetime(2024, 1, 1),
        )

        user = UserMapper.to_domain(row)

        assert user.role == UserRole.ADMIN
        assert user.is_admin
        assert user.affiliation.denomination == "Methodist"
        assert user.affiliation.branch_name == "North"
        assert user.affiliation.pastor == "Rev. Obi"
        assert UserMapper.to_domain(UserMapper.to_table(user)) == user


class TestSearchHistoryMapper:
    def test_filters_are_stored_as_plain_dict(self):
        entry = SearchHistoryEntry.record(UserId(uuid4()), "pastor", SearchFilters(category="clergy"))

        row = SearchHistoryMapper.to_table(entry)

        assert isinstance(row, SearchHistoryTable)
        assert row.filters == {"category": "clergy"}

    @given(
        query=st.text(max_size=50),
        category=st.none() | st.text(max_size=20),
        verified_only=st.booleans(),
    )
    def test_entry_survives_mapping(self, query, category, verified_only):
        entry = SearchHistoryEntry.record(
            UserId(uuid4()),
            query,
            SearchFilters(category=category, verified_only=verified_only),
        )

        assert SearchHistoryMapper.to_domain(SearchHistoryMapper.to_table(entry)) == entry
