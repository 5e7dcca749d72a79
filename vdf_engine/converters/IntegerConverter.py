"""Converter for integers crossing the engine boundary."""

from ..errors import InvalidParameters, MalformedInteger
from ..mpc import MPC
from ..mpc.types import MPZ


DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class IntegerConverter:
    """Canonical big-endian byte encoding and text parsing of non-negative integers."""

    @staticmethod
    def to_bytes(value: MPZ) -> bytes:
        """Encode a non-negative integer as minimal big-endian bytes.

        Zero encodes as the empty byte string, so no leading zero bytes are ever
        emitted and the encoding of a value is unique.

        Args:
            value (MPZ): The value to encode

        Returns:
            bytes: Big-endian encoding of value
        """
        value = int(value)
        if value < 0:
            raise InvalidParameters(
                "Only non-negative integers have a canonical encoding",
                context={"value": value},
            )
        return value.to_bytes((value.bit_length() + 7) // 8, "big")

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        """Decode big-endian bytes to an integer.

        Args:
            data (bytes): Big-endian encoding

        Returns:
            MPZ: The decoded value
        """
        return MPC.mpz(int.from_bytes(data, "big"))

    @staticmethod
    def parse(text: str) -> MPZ:
        """Parse a caller-supplied numeric string.

        Decimal by default; a 0x prefix selects hexadecimal.

        Args:
            text (str): Numeric text

        Returns:
            MPZ: The parsed non-negative integer
        """
        stripped = text.strip() if isinstance(text, str) else ""
        base = 10
        digits = stripped
        if digits[:2].lower() == "0x":
            base = 16
            digits = digits[2:]

        # int() would also accept signs and underscores, reject those up front
        allowed = HEX_DIGITS if base == 16 else DECIMAL_DIGITS
        if not digits or any(c not in allowed for c in digits):
            raise MalformedInteger("Invalid integer value", context={"value": text})
        return MPC.mpz(int(digits, base))
