import hashlib

from ..converters import IntegerConverter
from ..mpc.types import MPZ
from .abstract.IHashToGroup import IHashToGroup


class HashToGroup(IHashToGroup):
    """SHA-256 based map from an integer to a group element."""

    @staticmethod
    def hash(x: MPZ) -> MPZ:
        # No reduction here, evaluators and the verifier reduce downstream
        digest = hashlib.sha256(IntegerConverter.to_bytes(x)).digest()
        return IntegerConverter.from_bytes(digest)
