"""FastAPI application factory.

- Validates inputs and hands rows to the aggregation layer
- Returns the summary document for the dashboard UI
- No persistence, no authentication
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ledgerlens import __version__
from ledgerlens.config import Settings

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Dependency to get the settings the app was created with."""
    return request.app.state.settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Loaded from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()

    logging.getLogger("ledgerlens").setLevel(settings.log_level)

    app = FastAPI(
        title="Ledgerlens API",
        description="Ledger category summaries for monthly trend charts",
        version=__version__,
    )
    app.state.settings = settings

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from ledgerlens.api.routes import summary

    app.include_router(summary.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    logger.info("Ledgerlens API created (as-of %s)", settings.as_of_date.isoformat())
    return app


# Default app instance
app = create_app()
