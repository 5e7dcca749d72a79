from abc import ABC, abstractmethod
from ...mpc.types import MPZ
from ...parameters.ParameterSet import ParameterSet


class IVerifier(ABC):
    """Abstract base class defining the interface for VDF proof verification."""

    @staticmethod
    @abstractmethod
    def verify(params: ParameterSet, x: MPZ, y: MPZ, proof: MPZ, t: int) -> bool:
        """Check a claimed (y, proof) pair for input x.

        Args:
            params (ParameterSet): Parameters supplying the modulus G
            x (MPZ): The VDF input
            y (MPZ): The claimed output
            proof (MPZ): The claimed proof
            t (int): The delay exponent T

        Returns:
            bool: True if the proof is valid
        """
