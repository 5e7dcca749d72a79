import hashlib
import logging

from ..converters import IntegerConverter
from ..errors import PrimeSearchExhausted
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import MAX_PRIME_SEARCH_ITERATIONS, PRIMALITY_ROUNDS
from .abstract.IPrimeChallenge import IPrimeChallenge


logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class PrimeChallenge(IPrimeChallenge):
    """Hash-then-increment derivation of the challenge prime l = HPrime(g, y)."""

    @staticmethod
    def derive(
        g: MPZ,
        y: MPZ,
        max_iterations: int = MAX_PRIME_SEARCH_ITERATIONS,
    ) -> MPZ:
        """Derive the challenge prime for (g, y).

        The digest of the concatenated encodings of g and y is made odd and then
        walked upwards in steps of two until a probable prime is found.

        Args:
            g (MPZ): The group element derived from the input
            y (MPZ): The claimed output
            max_iterations (int): Number of increments allowed before giving up

        Returns:
            MPZ: The challenge prime l

        Raises:
            PrimeSearchExhausted: If no prime is found within max_iterations
        """
        digest = hashlib.sha256()
        digest.update(IntegerConverter.to_bytes(g))
        digest.update(IntegerConverter.to_bytes(y))
        candidate = IntegerConverter.from_bytes(digest.digest())

        if not MPC.is_odd(candidate):
            candidate += 1

        iteration = 0
        while not MPC.is_prime(candidate, PRIMALITY_ROUNDS):
            candidate += TWO
            iteration += 1
            if iteration > max_iterations:
                raise PrimeSearchExhausted(
                    "Failed to find a prime number",
                    context={"iterations": max_iterations},
                )

        logger.debug("Prime candidate after %d iterations: %s", iteration, candidate)
        return candidate
