"""Logging configuration for the application."""

import logging
import sys

from rolodex.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Application code logs through logfire; this covers libraries that use
    the standard ``logging`` module.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Third-party loggers stay quiet unless something goes wrong
    logging.getLogger("dishka").setLevel(logging.WARNING)

    logging.getLogger("rolodex").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
