"""Logging configuration for the application.

Call `configure_logging` once at startup, then use `get_logger`
in other modules.
"""

import logging
import sys
from functools import lru_cache


def configure_logging(debug: bool = False) -> None:
    """Configure the root logger and the application logger levels.

    Args:
        debug: Log application modules at DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("charsheet").setLevel(logging.DEBUG if debug else logging.INFO)

    # Third-party noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("firebase_admin").setLevel(logging.WARNING)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: The module name, typically __name__

    Returns:
        Logger instance

    Example:
        from charsheet.utils.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Character created")
    """
    return logging.getLogger(name)
