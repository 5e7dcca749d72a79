from typing import Optional

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return MPC.mpz(base) ** exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        return MPC.mod(a * b, modulus)

    @staticmethod
    def invert(value: MPZ, modulus: MPZ) -> Optional[MPZ]:
        if gmpy2.gcd(value, modulus) != 1:
            return None
        if modulus == 1:
            # every residue is congruent to 0 modulo 1
            return MPC.mpz(0)
        return gmpy2.invert(value, modulus)

    @staticmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        return gmpy2.is_prime(value, rounds)

    @staticmethod
    def is_odd(value: MPZ) -> bool:
        return gmpy2.is_odd(value)
