"""
Database module for the member directory.

Provides the async SQLModel engine/session manager and the translation of
connection failures into domain errors.
"""

from .error_handling import is_connection_error, store_operation
from .sqlmodel_engine import (
    SQLModelDatabaseManager,
    get_sqlmodel_db_manager,
    init_sqlmodel_database,
    shutdown_sqlmodel_database,
)

__all__ = [
    "SQLModelDatabaseManager",
    "get_sqlmodel_db_manager",
    "init_sqlmodel_database",
    "shutdown_sqlmodel_database",
    "is_connection_error",
    "store_operation",
]
