"""Utility class for environment variable management."""

import logging
import os
from enum import Enum
from typing import Any, cast

from ..protocol_constants import (
    DEFAULT_GAMMA,
    DEFAULT_GENERATOR,
    DEFAULT_KAPPA,
    DEFAULT_SECRET_ORDER,
    DEFAULT_TABLE_MODULUS,
)


logger = logging.getLogger(__name__)


class EnvVarType(Enum):
    """Types of environment variables."""
    INT = "int"
    STRING = "str"


class EnvironmentVariables(Enum):
    """
    Enum of known environment variables used in the application.

    Each enum value is a tuple of (env_var_name, default_value, type).
    """
    GENERATOR = ("VDF_GENERATOR", DEFAULT_GENERATOR, EnvVarType.INT)
    TABLE_MODULUS = ("VDF_TABLE_MODULUS", DEFAULT_TABLE_MODULUS, EnvVarType.INT)
    KAPPA = ("VDF_KAPPA", DEFAULT_KAPPA, EnvVarType.INT)
    GAMMA = ("VDF_GAMMA", DEFAULT_GAMMA, EnvVarType.INT)
    SECRET_ORDER = ("VDF_SECRET_ORDER", DEFAULT_SECRET_ORDER, EnvVarType.INT)
    LOG_LEVEL = ("LOG_LEVEL", "WARNING", EnvVarType.STRING)

    def __init__(self, env_name: str, default_value: Any, var_type: EnvVarType):
        self.env_name = env_name
        self.default_value = default_value
        self.var_type = var_type


class EnvironmentManager:
    """Static utility class for environment variable management."""

    @staticmethod
    def get_value(env_var: EnvironmentVariables, override_default: Any = None) -> Any:
        """
        Get a value from an environment variable with appropriate type conversion.

        Args:
            env_var: The environment variable to retrieve
            override_default: Optional value to override the default defined in the enum

        Returns:
            The value of the environment variable or the default with appropriate type
        """
        default = override_default if override_default is not None else env_var.default_value

        value = os.environ.get(env_var.env_name)
        if value is None:
            return default

        if env_var.var_type == EnvVarType.INT:
            try:
                return int(value)
            except ValueError:
                logger.warning(
                    "Ignoring non-integer %s=%r, using %r", env_var.env_name, value, default
                )
                return default
        return value

    @staticmethod
    def get_int(env_var: EnvironmentVariables, default = None) -> int:
        """
        Get an integer value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            int: The value of the environment variable or the default
        """
        return cast(int, EnvironmentManager.get_value(env_var, default))

    @staticmethod
    def get_string(env_var: EnvironmentVariables, default = None) -> str:
        """
        Get a string value from an environment variable.

        Args:
            env_var: The environment variable to retrieve
            default: Optional value to override the default defined in the enum

        Returns:
            str: The value of the environment variable or the default
        """
        return cast(str, EnvironmentManager.get_value(env_var, default))
