import logging
import time
from typing import Tuple

from ..errors import InvalidParameters, NoInverseExists
from ..hashing import HashToGroup, PrimeChallenge
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.ITrapdoorEvaluator import ITrapdoorEvaluator


logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class TrapdoorEvaluator(ITrapdoorEvaluator):
    """Fast evaluator for holders of the secret group order."""

    @staticmethod
    def evaluate(x: MPZ, t: int, sk: MPZ) -> Tuple[MPZ, MPZ, float]:
        """Compute (y, proof) in time proportional to log(t).

        Reducing 2^t modulo the secret order replaces t sequential squarings
        with a single exponentiation. Neither y nor the proof is reduced by a
        modulus.

        Args:
            x (MPZ): The VDF input
            t (int): The delay exponent T
            sk (MPZ): The secret group order

        Returns:
            Tuple[MPZ, MPZ, float]: y, proof and the wall-clock seconds taken

        Raises:
            InvalidParameters: If t is negative or sk is not positive
            NoInverseExists: If the challenge prime has no inverse modulo sk
            PrimeSearchExhausted: If the challenge prime cannot be derived
        """
        if t < 0:
            raise InvalidParameters("t must be non-negative", context={"t": t})
        if sk <= 0:
            raise InvalidParameters("sk must be positive")

        start_time = time.perf_counter()

        sk = MPC.mpz(sk)
        g = HashToGroup.hash(x)
        e = MPC.powmod(TWO, t, sk)  # 2^t mod sk
        y = MPC.pow(g, e)
        l = PrimeChallenge.derive(g, y)
        r = MPC.powmod(TWO, t, l)  # 2^t mod l

        l_inverse = MPC.invert(l, sk)
        if l_inverse is None:
            raise NoInverseExists(
                "Challenge prime is not invertible modulo the secret order",
                context={"l": l},
            )
        q = MPC.mod(l_inverse * (e - r), sk)
        proof = MPC.pow(g, q)

        elapsed = time.perf_counter() - start_time
        logger.info("Trapdoor evaluation took %.6f seconds (t=%d)", elapsed, t)
        return y, proof, elapsed
