"""Utility modules for the VDF engine."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .Logging import configure_logging

__all__ = ["EnvironmentManager", "EnvironmentVariables", "configure_logging"]
