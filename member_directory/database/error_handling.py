"""
Centralized error handling for SQLAlchemy-based database operations.

Connection-level failures are translated into the domain's
StoreUnavailableError so callers never see driver exceptions. Everything
else propagates unchanged; nothing here retries.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    TimeoutError as SQLAlchemyTimeoutError,
)

from member_directory.domain.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)

CONNECTION_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    SQLAlchemyTimeoutError,
    ConnectionError,
    OSError,
)


def is_connection_error(error: BaseException) -> bool:
    """Check whether an exception means the store could not be reached."""
    if isinstance(error, CONNECTION_ERRORS):
        return True
    # Raised by the session manager before the engine has been initialized.
    return isinstance(error, RuntimeError) and "not initialized" in str(error)


@asynccontextmanager
async def store_operation(operation: str) -> AsyncIterator[None]:
    """Translate connection failures raised inside the block.

    Usage:
        async with store_operation("profile search"):
            ...
    """
    try:
        yield
    except StoreUnavailableError:
        raise
    except Exception as error:
        if not is_connection_error(error):
            raise
        logger.error(
            "Store unavailable",
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
        )
        raise StoreUnavailableError(operation, str(error)) from error


__all__ = ["CONNECTION_ERRORS", "is_connection_error", "store_operation"]
