"""
Main script to run the Verifiable Delay Function (VDF).

Builds a parameter set, evaluates the VDF with the trapdoor evaluator and with
the table-based parallel evaluator, and verifies both results.

Functions:
    main(): Runs the VDF demonstration for the x and t given on the command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from vdf_engine.converters import IntegerConverter
from vdf_engine.errors import VDFError
from vdf_engine.evaluators import ParallelEvaluator, TrapdoorEvaluator
from vdf_engine.parameters import Setup
from vdf_engine.utils import EnvironmentManager, EnvironmentVariables, configure_logging
from vdf_engine.verifier import Verifier


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Evaluate and verify a VDF with the trapdoor and parallel evaluators."
    )
    parser.add_argument(
        "x",
        type=str,
        help="The input value x (decimal, or hex with 0x prefix)",
    )
    parser.add_argument(
        "t",
        type=str,
        help="The delay exponent t (number of squarings)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the VDF demonstration.

    Prints:
        y and the proof from each evaluator.
        Evaluation time of each evaluator.
        The verification result for each pair.
    """
    args = parse_args(argv)
    configure_logging()

    try:
        x = IntegerConverter.parse(args.x)
    except VDFError:
        print(f"Invalid value for x: {args.x}")
        return 1
    try:
        t = int(IntegerConverter.parse(args.t))
    except VDFError:
        print(f"Invalid value for t: {args.t}")
        return 1

    generator = EnvironmentManager.get_int(EnvironmentVariables.GENERATOR)
    table_modulus = EnvironmentManager.get_int(EnvironmentVariables.TABLE_MODULUS)
    kappa = EnvironmentManager.get_int(EnvironmentVariables.KAPPA)
    gamma = EnvironmentManager.get_int(EnvironmentVariables.GAMMA)
    sk = EnvironmentManager.get_int(EnvironmentVariables.SECRET_ORDER)

    try:
        params = Setup.setup(generator, table_modulus, t, kappa, gamma)

        # Trapdoor evaluation
        y, proof, trapdoor_time = TrapdoorEvaluator.evaluate(x, t, sk)
        print(f"y: {y}\nπ: {proof}")
        print(f"TrapdoorSK Time: {trapdoor_time:.6f} seconds")

        valid = Verifier.verify(params, x, y, proof, t)
        print(f"Verification: {valid}")

        # Parallel evaluation
        y_opt, proof_opt, parallel_time = ParallelEvaluator.evaluate(params, x)
        print(f"Optimized y: {y_opt}\nOptimized π: {proof_opt}")
        print(f"OptimizedEval Time: {parallel_time:.6f} seconds")

        valid_opt = Verifier.verify(params, x, y_opt, proof_opt, t)
        print(f"OptimizedEval Verification: {valid_opt}")
    except VDFError as exc:
        logger.error("VDF evaluation failed: %s", exc)
        print(f"Error: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
