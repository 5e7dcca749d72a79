from abc import ABC, abstractmethod
from typing import Tuple
from ...mpc.types import MPZ


class IParameterSet(ABC):
    """Abstract base class defining the interface for VDF public parameters."""

    @abstractmethod
    def get_G(self) -> MPZ:
        """Get the modulus G in which proofs are checked.

        Returns:
            MPZ: The modulus G
        """

    @abstractmethod
    def get_prime_l(self) -> MPZ:
        """Get the table modulus PrimeL.

        Returns:
            MPZ: The table modulus
        """

    @abstractmethod
    def get_t(self) -> int:
        """Get the delay exponent T.

        Returns:
            int: Number of sequential squarings
        """

    @abstractmethod
    def get_kappa(self) -> int:
        """Get the block width Kappa.

        Returns:
            int: Bits per exponent block
        """

    @abstractmethod
    def get_gamma(self) -> int:
        """Get the parallelism Gamma.

        Returns:
            int: Number of workers
        """

    @abstractmethod
    def get_table(self) -> Tuple[MPZ, ...]:
        """Get the precomputed table C.

        Returns:
            Tuple[MPZ, ...]: C[i] = generator^(2^(Kappa*Gamma*i)) mod PrimeL
        """
