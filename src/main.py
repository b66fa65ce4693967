"""Application entry point.

Serves the reference chat backend and the NiceGUI chat page. The page talks
to the backend over HTTP, so both can also run as separate processes.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stdout at LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_integrated() -> None:
    """Serve the backend and the chat page from one server.

    The page streams from the backend's /chat route on the same port.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    os.environ.setdefault("API_BASE_URL", f"http://localhost:{port}")

    app = create_app()
    ui.run_with(
        app,
        title="Stream Chat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "stream-chat-secret"),
    )

    logger.info(f"Chat UI and backend on http://localhost:{port}/")
    uvicorn.run(app, host=host, port=port, log_level=os.getenv("LOG_LEVEL", "info").lower())


def run_separate() -> None:
    """Run the backend on port 8000 and the chat page on port 8080."""
    import subprocess
    import time

    logger.info("Starting backend on http://localhost:8000")
    logger.info("Starting chat UI on http://localhost:8080")

    procs = [
        subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "src.api.app:app",
                "--host",
                os.getenv("HOST", "0.0.0.0"),
                "--port",
                "8000",
            ]
        ),
        subprocess.Popen([sys.executable, "-c", "from src.ui.chat_page import main; main()"]),
    ]

    try:
        while all(proc.poll() is None for proc in procs):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in procs:
            proc.terminate()
        for proc in procs:
            proc.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run backend and UI on different ports.
    Default is integrated mode (both on port 8000).
    """
    configure_logging()
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Stream Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
