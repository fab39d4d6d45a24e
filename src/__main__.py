"""Run the service with uvicorn: ``python -m src``."""

import logging

import uvicorn

from src.config import Settings
from src.main import app

logger = logging.getLogger("src")


def main() -> None:
    settings: Settings = app.state.settings

    logger.info("%s running on port %d", settings.app_name, settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
