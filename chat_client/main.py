"""Chat client entry point.

Serves the chat page (NiceGUI) and /health (FastAPI) from one uvicorn server.
Completion and ingestion endpoints come from .env; see chat_client.config.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Start the chat client web server.

    Mounts the chat page onto the host app and blocks in uvicorn until stopped.
    """
    import uvicorn
    from nicegui import ui

    from chat_client.api.app import create_app
    from chat_client.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="CDAC-ChatBot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chat-client-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Chat page on http://localhost:{port}/, health check on /health")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
