import logging
from typing import Optional

from .settings import LoaderSettings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None):
    """Configure basic logging for whichever process embeds the loader.

    Level comes from ``level`` or JOBPORTAL_LOG_LEVEL. If the host application
    already installed handlers, this is a no-op so its setup wins.
    """
    if logging.getLogger().handlers:
        # Already configured (avoid duplicate handlers in reload / tests)
        return
    level = (level or LoaderSettings().LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str):
    configure_logging()
    return logging.getLogger(name)
