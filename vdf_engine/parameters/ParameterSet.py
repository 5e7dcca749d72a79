from typing import Sequence, Tuple

from ..errors import InvalidParameters
from ..mpc.types import MPZ
from .abstract.IParameterSet import IParameterSet


class ParameterSet(IParameterSet):
    """Immutable public parameters shared by the evaluators and the verifier."""

    __slots__ = ("_G", "_prime_l", "_t", "_kappa", "_gamma", "_table")

    def __init__(
        self,
        G: MPZ,
        prime_l: MPZ,
        t: int,
        kappa: int,
        gamma: int,
        table: Sequence[MPZ],
    ) -> None:
        """Initialize a parameter set.

        Use Setup.setup() rather than calling this directly; it builds the table.

        Args:
            G (MPZ): The modulus
            prime_l (MPZ): The table modulus
            t (int): The delay exponent
            kappa (int): Bits per exponent block
            gamma (int): Number of workers
            table (Sequence[MPZ]): The fully populated precomputed table
        """
        expected = t // (kappa * gamma) + 1
        if len(table) != expected:
            raise InvalidParameters(
                "Precomputed table must be fully populated",
                context={"expected": expected, "actual": len(table)},
            )
        object.__setattr__(self, "_G", G)
        object.__setattr__(self, "_prime_l", prime_l)
        object.__setattr__(self, "_t", t)
        object.__setattr__(self, "_kappa", kappa)
        object.__setattr__(self, "_gamma", gamma)
        object.__setattr__(self, "_table", tuple(table))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"ParameterSet(G={self._G}, prime_l={self._prime_l}, t={self._t}, "
            f"kappa={self._kappa}, gamma={self._gamma}, table_size={self.table_size})"
        )

    def get_G(self) -> MPZ:
        return self._G

    def get_prime_l(self) -> MPZ:
        return self._prime_l

    def get_t(self) -> int:
        return self._t

    def get_kappa(self) -> int:
        return self._kappa

    def get_gamma(self) -> int:
        return self._gamma

    def get_table(self) -> Tuple[MPZ, ...]:
        return self._table

    def table_entry(self, i: int) -> MPZ:
        return self._table[i]

    @property
    def table_size(self) -> int:
        return len(self._table)

    @property
    def last_table_index(self) -> int:
        """Largest table index, floor(T / (Kappa * Gamma))."""
        return self._t // (self._kappa * self._gamma)
