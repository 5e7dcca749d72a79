from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IHashToGroup(ABC):
    """Abstract base class defining the interface for mapping integers to group elements."""

    @staticmethod
    @abstractmethod
    def hash(x: MPZ) -> MPZ:
        """Map an input to a group element.

        Args:
            x (MPZ): The VDF input

        Returns:
            MPZ: The group element g
        """
