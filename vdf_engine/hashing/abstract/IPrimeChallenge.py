from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IPrimeChallenge(ABC):
    """Abstract base class defining the interface for the Fiat-Shamir prime challenge."""

    @staticmethod
    @abstractmethod
    def derive(g: MPZ, y: MPZ) -> MPZ:
        """Derive the challenge prime l from (g, y).

        Args:
            g (MPZ): The group element derived from the input
            y (MPZ): The claimed output

        Returns:
            MPZ: A probable prime
        """
