"""FastAPI host application.

Serves the health endpoint; main.py mounts the NiceGUI chat page onto it.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chat_client import __version__
from chat_client.config import get_client_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log the configured services on startup and note shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_client_config()
    logger.info("Starting Chat Client...")
    logger.info(f"Completion endpoint: {config.completion_base_url}")
    logger.info(f"Ingestion endpoint: {config.ingest_base_url}")
    yield
    logger.info("Shutting down Chat Client...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Chat Client",
        description=(
            "Browser chat client for an OpenAI-compatible completion service, "
            "with document upload and spreadsheet transcript export."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "chat-client"}

    return application
