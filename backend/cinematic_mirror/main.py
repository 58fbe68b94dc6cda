"""
Cinematic Mirror - application factory.

Audition interview, personality profile synthesis and styling consultation.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinematic_mirror import __version__
from cinematic_mirror.api.errors import register_error_handlers
from cinematic_mirror.core.config import get_settings
from cinematic_mirror.core.logger import logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Starting Cinematic Mirror in {settings.ENVIRONMENT} mode...")

    from cinematic_mirror.infrastructure.local.database import dispose_engine, init_db

    await init_db()

    yield

    # Shutdown
    logger.info("Shutting down Cinematic Mirror...")
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Cinematic Mirror",
        description="Audition interview, personality profiles and styling consultation",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    register_error_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from cinematic_mirror.api import consultation, interview

    app.include_router(interview.router, prefix="/api/interview", tags=["interview"])
    app.include_router(consultation.router, prefix="/api/consultation", tags=["consultation"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": __version__,
        }

    return app


app = create_app()
