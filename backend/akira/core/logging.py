"""
Logging setup for the API process.
"""
import logging

from akira.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Log level name, defaults to ``settings.log_level``
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
