"""Environment variable handling for deepvalidate."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def load_env_file(path: Optional[Path] = None) -> None:
    """Load environment variables from a .env file, if present.

    Variables already set in the environment take precedence.

    Args:
        path: Optional path to the .env file, defaults to ``.env``
    """
    env_file = path or Path(".env")
    if env_file.exists():
        load_dotenv(env_file)


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable, loading the root .env file first.

    Args:
        key: Environment variable key
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    load_env_file()
    return os.getenv(key, default)


def get_log_level() -> int:
    """Resolve the configured log level for the deepvalidate logger."""
    name = (get_env_var(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid {LOG_LEVEL_ENV} value: {name}")
    return level
