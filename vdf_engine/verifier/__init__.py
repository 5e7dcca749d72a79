"""Proof verification."""

from .Verifier import Verifier
from .abstract.IVerifier import IVerifier

__all__ = ["Verifier", "IVerifier"]
