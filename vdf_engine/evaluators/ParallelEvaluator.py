import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional, Tuple

from ..errors import InvalidParameters
from ..hashing import HashToGroup
from ..mpc import MPC
from ..mpc.types import MPZ
from ..parameters.ParameterSet import ParameterSet
from .abstract.IParallelEvaluator import IParallelEvaluator


logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)
MASK_64 = (1 << 64) - 1


class ParallelEvaluator(IParallelEvaluator):
    """Public evaluator built on the precomputed table and Gamma concurrent shards."""

    @staticmethod
    def evaluate(
        params: ParameterSet,
        x: MPZ,
        t: Optional[int] = None,
        kappa: Optional[int] = None,
        gamma: Optional[int] = None,
    ) -> Tuple[MPZ, MPZ, float]:
        ParallelEvaluator._check_consistent(params, t, kappa, gamma)
        gamma = params.get_gamma()

        start_time = time.perf_counter()

        g = HashToGroup.hash(x)
        t_exp = MPC.pow(TWO, params.get_t())  # full 2^t, never reduced

        # Workers only read the immutable table, results are folded after the join
        with ThreadPoolExecutor(max_workers=gamma) as executor:
            futures = [
                executor.submit(ParallelEvaluator.run_shard, params, t_exp, j)
                for j in range(gamma)
            ]
            shard_results = [future.result() for future in as_completed(futures)]

        y, proof = ParallelEvaluator.aggregate(params, g, shard_results)

        elapsed = time.perf_counter() - start_time
        logger.info(
            "Parallel evaluation took %.6f seconds (t=%d, gamma=%d)",
            elapsed, params.get_t(), gamma,
        )
        return y, proof, elapsed

    @staticmethod
    def run_shard(params: ParameterSet, t_exp: MPZ, j: int) -> Tuple[MPZ, MPZ]:
        """Accumulate the table entries selected for shard j.

        Args:
            params (ParameterSet): Parameters holding the precomputed table
            t_exp (MPZ): The unreduced exponent 2^t
            j (int): Shard index in 0..gamma

        Returns:
            Tuple[MPZ, MPZ]: (local y mod PrimeL, local proof mod G)
        """
        prime_l = params.get_prime_l()
        G = params.get_G()
        kappa = params.get_kappa()
        gamma = params.get_gamma()

        local_y = MPC.mpz(1)
        local_proof = MPC.mpz(1)
        for i in range(params.last_table_index + 1):
            b = ParallelEvaluator.get_block(t_exp, i * gamma + j, kappa, prime_l)
            if b != 0:
                entry = params.table_entry(i)
                local_y = MPC.mulmod(local_y, entry, prime_l)
                local_proof = MPC.mulmod(local_proof, entry, G)

        logger.debug("Shard %d finished", j)
        return local_y, local_proof

    @staticmethod
    def aggregate(
        params: ParameterSet, g: MPZ, shard_results: Iterable[Tuple[MPZ, MPZ]]
    ) -> Tuple[MPZ, MPZ]:
        """Fold shard results into (y, proof); the fold is order-independent.

        Args:
            params (ParameterSet): Parameters supplying both moduli
            g (MPZ): The group element derived from the input, the starting y
            shard_results (Iterable[Tuple[MPZ, MPZ]]): (local y, local proof) per shard

        Returns:
            Tuple[MPZ, MPZ]: The output y and the proof
        """
        prime_l = params.get_prime_l()
        G = params.get_G()

        y = MPC.mpz(g)
        proof = MPC.mpz(1)
        for local_y, local_proof in shard_results:
            y = MPC.mulmod(y, local_y, prime_l)
            proof = MPC.mulmod(proof, local_proof, G)
        return y, proof

    @staticmethod
    def get_block(e: MPZ, i: int, kappa: int, prime_l: MPZ) -> int:
        """Select the kappa-bit block i of e, scaled by prime_l.

        Computes (2^(i*kappa) * e) mod (2^kappa * prime_l), truncated to a
        signed 64-bit integer.

        Args:
            e (MPZ): The exponent being decomposed
            i (int): Block index
            kappa (int): Block width in bits
            prime_l (MPZ): Table modulus

        Returns:
            int: The block value
        """
        exp = MPC.pow(TWO, i * kappa)
        mod = MPC.pow(TWO, kappa) * prime_l
        block = int(MPC.mod(exp * e, mod)) & MASK_64
        return block - (1 << 64) if block >> 63 else block

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _check_consistent(
        params: ParameterSet,
        t: Optional[int],
        kappa: Optional[int],
        gamma: Optional[int],
    ) -> None:
        """Reject explicit arguments that disagree with the table in params."""
        expected = {
            "t": (t, params.get_t()),
            "kappa": (kappa, params.get_kappa()),
            "gamma": (gamma, params.get_gamma()),
        }
        for name, (given, actual) in expected.items():
            if given is not None and given != actual:
                raise InvalidParameters(
                    f"{name} does not match the parameter set",
                    context={"given": given, "expected": actual},
                )
