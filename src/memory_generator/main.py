"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from memory_generator.app_logging import configure_logging
from memory_generator.config import Settings

_logger = logging.getLogger(__name__)


def main() -> None:
    """Run the API server on the configured host and port."""
    settings = Settings()
    configure_logging(settings.log_level)
    _logger.info("Memory Generator server running on port %s", settings.port)
    uvicorn.run(
        "memory_generator.api.asgi:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
