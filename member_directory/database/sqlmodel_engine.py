"""
SQLModel database engine and session management.

This module provides SQLAlchemy/SQLModel database initialization, connection pooling,
and async session management for PostgreSQL.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from member_directory.core.config import Settings

logger = structlog.get_logger(__name__)


class SQLModelDatabaseManager:
    """
    SQLModel database manager with async session support.

    Provides SQLAlchemy engine and session management for the application.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if SQLModel manager is initialized."""
        return self._initialized and self.engine is not None

    def _build_database_url(self) -> str:
        """
        Build SQLAlchemy async database URL from settings.

        Converts PostgreSQL URL to SQLAlchemy async format.
        """
        url = str(self.settings.get_postgres_url())
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url

    async def initialize(self) -> None:
        """
        Initialize SQLModel engine and session factory.

        Sets up the async engine and verifies connectivity.
        """
        if self._initialized:
            logger.warning("SQLModel database manager already initialized")
            return

        database_url = self._build_database_url()

        try:
            self.engine = create_async_engine(
                database_url,
                pool_size=self.settings.DB_POOL_SIZE,
                max_overflow=self.settings.DB_POOL_SIZE * 2,
                pool_timeout=self.settings.DB_POOL_TIMEOUT,
                pool_recycle=3600,
                pool_pre_ping=True,
                echo=self.settings.DEBUG,
                connect_args={
                    "server_settings": {
                        "application_name": "member-directory-search",
                    }
                }
            )

            self.async_session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )

            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            self._initialized = True
            logger.info(
                "SQLModel database manager initialized successfully",
                database_url=database_url.split("@")[0] + "@***"  # Hide credentials
            )

        except Exception as e:
            logger.error("Failed to initialize SQLModel database manager", error=str(e))
            raise

    async def create_tables(self) -> None:
        """
        Create all SQLModel tables.

        Used for development and testing. In production, use Alembic migrations.
        """
        if not self.engine:
            raise RuntimeError("Database manager not initialized")

        # Import all models to ensure they're registered
        from member_directory.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        logger.info("SQLModel tables created successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session with automatic commit and cleanup.

        Usage:
            async with db_manager.get_session() as session:
                result = await session.execute(select(ProfileTable))
        """
        if not self.async_session_factory:
            raise RuntimeError("Database manager not initialized")

        session = self.async_session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform health check on the database connection.

        Returns health status information for monitoring.
        """
        if not self.engine:
            return {
                "status": "unhealthy",
                "error": "Database manager not initialized"
            }

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1 as health_check"))

            pool = self.engine.pool
            return {
                "status": "healthy",
                "pool_size": pool.size(),
                "checked_out": pool.checkedout(),
            }

        except Exception as e:
            logger.error("SQLModel database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }

    async def shutdown(self) -> None:
        """
        Shutdown SQLModel database manager and close connections.
        """
        if self.engine:
            try:
                await self.engine.dispose()
                logger.info("SQLModel database manager shut down successfully")
            except Exception as e:
                logger.error("Error during SQLModel database shutdown", error=str(e))
            finally:
                self.engine = None
                self.async_session_factory = None
                self._initialized = False


# Global SQLModel database manager instance
_sqlmodel_db_manager: Optional[SQLModelDatabaseManager] = None


def get_sqlmodel_db_manager(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    """
    Get global SQLModel database manager instance.

    Creates the instance on first call with provided settings.
    Subsequent calls return the existing instance.
    """
    global _sqlmodel_db_manager

    if _sqlmodel_db_manager is None:
        if settings is None:
            from member_directory.core.config import get_settings
            settings = get_settings()
        _sqlmodel_db_manager = SQLModelDatabaseManager(settings)

    return _sqlmodel_db_manager


async def init_sqlmodel_database(settings: Optional[Settings] = None) -> SQLModelDatabaseManager:
    """
    Initialize global SQLModel database manager.

    Call this during application startup to set up the database connection.
    """
    db_manager = get_sqlmodel_db_manager(settings)
    await db_manager.initialize()
    return db_manager


async def shutdown_sqlmodel_database() -> None:
    """
    Shutdown global SQLModel database manager.

    Call this during application shutdown to clean up connections.
    """
    global _sqlmodel_db_manager
    if _sqlmodel_db_manager:
        await _sqlmodel_db_manager.shutdown()
        _sqlmodel_db_manager = None
