import logging

from ..errors import InvalidParameters
from ..hashing import HashToGroup, PrimeChallenge
from ..mpc import MPC
from ..mpc.types import MPZ
from ..parameters.ParameterSet import ParameterSet
from .abstract.IVerifier import IVerifier


logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class Verifier(IVerifier):
    """Verifier for outputs of either evaluator."""

    @staticmethod
    def verify(params: ParameterSet, x: MPZ, y: MPZ, proof: MPZ, t: int) -> bool:
        # g and l are always rederived, never taken from the prover
        if t < 0:
            raise InvalidParameters("t must be non-negative", context={"t": t})

        G = params.get_G()
        g = HashToGroup.hash(x)
        l = PrimeChallenge.derive(g, y)
        r = MPC.powmod(TWO, t, l)

        lhs = MPC.powmod(proof, l, G)
        rhs = MPC.mulmod(MPC.powmod(g, r, G), y, G)

        valid = lhs == rhs
        if not valid:
            logger.debug("Proof rejected for t=%d", t)
        return valid
