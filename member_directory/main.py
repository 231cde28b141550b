"""
Member Directory Search - Main FastAPI Application
"""

import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from member_directory.api import create_api_router
from member_directory.core.config import get_settings
from member_directory.core.logging import configure_logging
from member_directory.database.sqlmodel_engine import (
    get_sqlmodel_db_manager,
    init_sqlmodel_database,
    shutdown_sqlmodel_database,
)
from member_directory.infrastructure.providers.repository_provider import reset_repositories

configure_logging(get_settings())

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting Member Directory Search API", version=app.version)

    try:
        await init_sqlmodel_database(settings)
        logger.info("Database connection initialized")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    yield

    logger.info("Shutting down Member Directory Search API")
    reset_repositories()
    await shutdown_sqlmodel_database()


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Ranked search, suggestions and search history over approved member profiles",
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router())

    @app.get("/health")
    async def health_check():
        """Health check including the database connection"""
        database = await get_sqlmodel_db_manager().health_check()
        return {
            "status": "healthy" if database["status"] == "healthy" else "degraded",
            "version": app.version,
            "environment": settings.ENVIRONMENT,
            "database": database,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "member_directory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,  # Use our structured logging
    )
