"""Root logger configuration for command-line entry points."""

import logging

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = None) -> int:
    """Configure the root logger from LOG_LEVEL unless a level is given.

    Unknown level names fall back to WARNING.

    Returns:
        int: The numeric level applied
    """
    name = (level or EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL)).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=True)
    return numeric
