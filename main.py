"""Main entry point for the agenttrace debug server."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from agenttrace.api import create_fastapi_app
from agenttrace.app import Application
from agenttrace.config import load_settings
from agenttrace.logging_config import setup_logging


def main():
    """Run the debug API server."""
    project_root = Path(__file__).resolve().parent
    load_dotenv(project_root / ".env")

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = create_fastapi_app(Application(settings=settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
