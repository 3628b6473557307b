# jobportal_config/deps.py
from typing import Optional

from .loader import load
from .schemas import Config

_config: Optional[Config] = None


def get_config() -> Config:
    """Load the configuration on first use and hand out the same record afterwards.

    Raises ConfigError (from ``load``) if the environment is not usable.
    """
    global _config
    if _config is None:
        _config = load()
    return _config


def set_config(config: Config) -> None:
    """Install an explicit configuration, e.g. one built by a test."""
    global _config
    _config = config


def reset_config() -> None:
    global _config
    _config = None
