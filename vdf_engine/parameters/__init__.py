"""Parameter set and one-time setup."""

from .ParameterSet import ParameterSet
from .Setup import Setup
from .abstract.IParameterSet import IParameterSet

__all__ = ["ParameterSet", "Setup", "IParameterSet"]
