"""Run the logbook server with uvicorn."""

import logging

import uvicorn

from fieldday.core.config import get_settings
from fieldday.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "fieldday.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
