from abc import ABC, abstractmethod
from typing import Optional, Tuple
from ...mpc.types import MPZ
from ...parameters.ParameterSet import ParameterSet


class IParallelEvaluator(ABC):
    """Abstract base class defining the interface for the table-based public evaluator."""

    @staticmethod
    @abstractmethod
    def evaluate(
        params: ParameterSet,
        x: MPZ,
        t: Optional[int] = None,
        kappa: Optional[int] = None,
        gamma: Optional[int] = None,
    ) -> Tuple[MPZ, MPZ, float]:
        """Evaluate the VDF without the secret, sharding across Gamma workers.

        Args:
            params (ParameterSet): Parameters holding the precomputed table
            x (MPZ): The VDF input
            t (Optional[int]): Delay exponent, must match params when given
            kappa (Optional[int]): Block width, must match params when given
            gamma (Optional[int]): Worker count, must match params when given

        Returns:
            Tuple[MPZ, MPZ, float]: The output y, the proof and the elapsed seconds
        """
