# pwdhash/config.py
import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


def load_log_level(value: str) -> int:
    """Translate a level name such as 'debug' into a logging level."""
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {value!r}")
    return level


def setup_config() -> Dict[str, object]:
    """Load environment files and resolve settings.

    Only logging is configurable; hashing behaviour and output never depend
    on the environment. Problems are returned under 'errors' so they can be
    logged once logging is set up.
    """
    env_name = os.getenv('ENVIRONMENT', 'development')
    for env_file in (f"{env_name}.env", '.env'):
        if Path(env_file).is_file():
            load_dotenv(env_file)
            break

    errors = []
    raw_level = os.getenv('PWDHASH_LOG_LEVEL', DEFAULT_LOG_LEVEL)
    try:
        log_level = load_log_level(raw_level)
    except ConfigError as e:
        errors.append(f"{e}, using {DEFAULT_LOG_LEVEL}")
        log_level = logging.WARNING

    return {'log_level': log_level, 'errors': errors}


def setup_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
