"""
Errors raised by the VDF engine.

Every failure is fatal for the current call and propagates to the immediate
caller; nothing is retried internally. A verifier returning False is a normal
outcome and never raises.

Subclasses
----------
- PrimeSearchExhausted : hash-to-prime ran out of candidates.
- NoInverseExists      : challenge prime is not invertible modulo the secret order.
- InvalidParameters    : Setup/evaluator arguments rejected before any work.
- MalformedInteger     : caller-supplied numeric text could not be parsed.
"""

from enum import IntEnum
from typing import Any, Dict, Mapping, Optional


class ErrorCode(IntEnum):
    """Stable error codes for programmatic handling."""
    VDF_GENERIC = 1000
    PRIME_SEARCH_EXHAUSTED = 1001
    NO_INVERSE_EXISTS = 1002
    INVALID_PARAMETERS = 1003
    MALFORMED_INTEGER = 1004


class VDFError(Exception):
    """Base class for VDF engine exceptions.

    Args:
        message (str): Human-readable description
        code (ErrorCode): Stable code for programmatic handling
        context (Mapping[str, Any] | None): Optional small dict of structured fields
    """

    code: ErrorCode = ErrorCode.VDF_GENERIC

    def __init__(
        self,
        message: str,
        *,
        code: Optional[ErrorCode] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context: Dict[str, Any] = dict(context or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": int(self.code),
            "message": self.message,
            "context": dict(self.context),
        }

    def __str__(self) -> str:
        if not self.context:
            return f"[{int(self.code)}] {self.message}"
        fields = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"[{int(self.code)}] {self.message} ({fields})"


class PrimeSearchExhausted(VDFError):
    code = ErrorCode.PRIME_SEARCH_EXHAUSTED


class NoInverseExists(VDFError):
    code = ErrorCode.NO_INVERSE_EXISTS


class InvalidParameters(VDFError, ValueError):
    code = ErrorCode.INVALID_PARAMETERS


class MalformedInteger(VDFError, ValueError):
    code = ErrorCode.MALFORMED_INTEGER


__all__ = [
    "ErrorCode",
    "VDFError",
    "PrimeSearchExhausted",
    "NoInverseExists",
    "InvalidParameters",
    "MalformedInteger",
]
