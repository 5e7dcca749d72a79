from abc import ABC, abstractmethod
from typing import Optional
from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp without any reduction.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value

        Returns:
            mpz: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def mulmod(a: MPZ, b: MPZ, modulus: MPZ) -> MPZ:
        """Compute (a * b) % modulus.

        Args:
            a (mpz): First factor
            b (mpz): Second factor
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Reduced product
        """

    @staticmethod
    @abstractmethod
    def invert(value: MPZ, modulus: MPZ) -> Optional[MPZ]:
        """Compute the inverse of value modulo modulus.

        Args:
            value (mpz): Value to invert
            modulus (mpz): Modulus

        Returns:
            Optional[mpz]: The inverse, or None if value and modulus are not coprime
        """

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        """Probabilistic primality test.

        Args:
            value (mpz): Candidate
            rounds (int): Number of Miller-Rabin rounds

        Returns:
            bool: True if value is probably prime
        """

    @staticmethod
    @abstractmethod
    def is_odd(value: MPZ) -> bool:
        """Check the lowest bit of value."""
