"""Hash-to-group and hash-to-prime derivations."""

from .HashToGroup import HashToGroup
from .PrimeChallenge import PrimeChallenge
from .abstract.IHashToGroup import IHashToGroup
from .abstract.IPrimeChallenge import IPrimeChallenge

__all__ = ["HashToGroup", "PrimeChallenge", "IHashToGroup", "IPrimeChallenge"]
