"""Verifiable delay function engine with trapdoor and table-based parallel evaluators."""

from .errors import (
    ErrorCode,
    InvalidParameters,
    MalformedInteger,
    NoInverseExists,
    PrimeSearchExhausted,
    VDFError,
)
from .converters import IntegerConverter
from .hashing import HashToGroup, PrimeChallenge
from .parameters import ParameterSet, Setup
from .evaluators import ParallelEvaluator, TrapdoorEvaluator
from .verifier import Verifier

__all__ = [
    "ErrorCode",
    "InvalidParameters",
    "MalformedInteger",
    "NoInverseExists",
    "PrimeSearchExhausted",
    "VDFError",
    "IntegerConverter",
    "HashToGroup",
    "PrimeChallenge",
    "ParameterSet",
    "Setup",
    "ParallelEvaluator",
    "TrapdoorEvaluator",
    "Verifier",
]
