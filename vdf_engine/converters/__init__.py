"""Converters between integers and their external representations."""

from .IntegerConverter import IntegerConverter

__all__ = ["IntegerConverter"]
