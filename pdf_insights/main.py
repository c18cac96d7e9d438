"""PDF Insights entry point.

Integrated mode serves the analysis API and the page from one process on PORT.
Separate mode starts the API on PORT and the page on UI_PORT, each in its own
process. Settings come from the environment and an optional .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Model and server settings may live in .env
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

DEFAULT_API_PORT = 8000
DEFAULT_UI_PORT = 8080


def api_port() -> int:
    return int(os.getenv("PORT", str(DEFAULT_API_PORT)))


def ui_port() -> int:
    return int(os.getenv("UI_PORT", str(DEFAULT_UI_PORT)))


def publish_api_location(port: int) -> str:
    """Point the page's API client at the local API unless API_BASE_URL is set.

    Returns the URL the client will use.
    """
    return os.environ.setdefault("API_BASE_URL", f"http://localhost:{port}")


def run_integrated() -> None:
    """Serve the API and the page from a single uvicorn server."""
    import uvicorn
    from nicegui import ui

    port = api_port()
    api_url = publish_api_location(port)

    from pdf_insights.api.app import create_app
    from pdf_insights.ui.insights_page import insights_page  # noqa: F401 - registers "/"

    app = create_app()
    ui.run_with(app, title="PDF Insights", favicon="📄")

    logger.info(f"Serving PDF Insights on http://localhost:{port}/ (API at {api_url})")
    logger.info(f"OpenAPI docs at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Start the API and the page as two child processes and wait on both.

    Stopping either one stops the other.
    """
    import asyncio
    import subprocess

    port = api_port()
    page_env = {**os.environ, "UI_PORT": str(ui_port())}
    page_env.setdefault("API_BASE_URL", f"http://localhost:{port}")

    async def supervise() -> None:
        logger.info(f"API on http://localhost:{port}")
        logger.info(f"Page on http://localhost:{page_env['UI_PORT']} -> {page_env['API_BASE_URL']}")

        api_proc = subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "pdf_insights.api.app:app",
                "--host",
                os.getenv("HOST", "0.0.0.0"),
                "--port",
                str(port),
                "--reload",
            ]
        )
        page_proc = subprocess.Popen(
            [sys.executable, "-c", "from pdf_insights.ui.insights_page import main; main()"],
            env=page_env,
        )
        children = (api_proc, page_proc)

        try:
            while all(proc.poll() is None for proc in children):
                await asyncio.sleep(1)
        except KeyboardInterrupt:
            logger.info("Shutting down servers...")
        finally:
            for proc in children:
                proc.terminate()
            for proc in children:
                proc.wait()

    asyncio.run(supervise())


def main() -> None:
    """Run in the mode named by RUN_MODE ("integrated" by default, or "separate")."""
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting PDF Insights in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
