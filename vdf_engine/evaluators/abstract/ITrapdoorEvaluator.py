from abc import ABC, abstractmethod
from typing import Tuple
from ...mpc.types import MPZ


class ITrapdoorEvaluator(ABC):
    """Abstract base class defining the interface for the secret-order evaluator."""

    @staticmethod
    @abstractmethod
    def evaluate(x: MPZ, t: int, sk: MPZ) -> Tuple[MPZ, MPZ, float]:
        """Evaluate the VDF using the secret group order.

        Args:
            x (MPZ): The VDF input
            t (int): The delay exponent T
            sk (MPZ): The secret group order

        Returns:
            Tuple[MPZ, MPZ, float]: The output y, the proof and the elapsed seconds
        """
