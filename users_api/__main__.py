"""Serve the users API with uvicorn.

Usage:
    python -m users_api

Host, port and data file come from ``HOST``, ``PORT`` and ``USERS_DATA_FILE``.
"""
import logging

import uvicorn

from users_api.app_factory import app
from users_api.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info("listening on port %d", settings.port)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        logger.info("stopped")


if __name__ == "__main__":
    main()
