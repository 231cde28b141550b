"""Unit tests for connection error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from member_directory.database.error_handling import is_connection_error, store_operation
from member_directory.domain.exceptions import StoreUnavailableError, ValidationError


class TestStoreOperation:
    async def test_connection_error_becomes_store_unavailable(self):
        with pytest.raises(StoreUnavailableError) as exc_info:
            async with store_operation("profile search"):
                raise OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))

        assert exc_info.value.operation == "profile search"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_os_level_failure_becomes_store_unavailable(self):
        with pytest.raises(StoreUnavailableError):
            async with store_operation("user lookup"):
                raise ConnectionResetError("reset by peer")

    async def test_uninitialized_engine_becomes_store_unavailable(self):
        with pytest.raises(StoreUnavailableError):
            async with store_operation("search history list"):
                raise RuntimeError("Database manager not initialized")

    async def test_other_errors_propagate_unchanged(self):
        with pytest.raises(IntegrityError):
            async with store_operation("search history insert"):
                raise IntegrityError("INSERT", {}, Exception("duplicate key"))

        with pytest.raises(ValidationError):
            async with store_operation("profile search"):
                raise ValidationError("bad input")

    async def test_store_unavailable_is_not_wrapped_twice(self):
        original = StoreUnavailableError("inner", "down")
        with pytest.raises(StoreUnavailableError) as exc_info:
            async with store_operation("outer"):
                raise original
        assert exc_info.value is original

    def test_is_connection_error(self):
        assert is_connection_error(TimeoutError())
        assert not is_connection_error(ValueError("x"))
        assert not is_connection_error(RuntimeError("something else"))
