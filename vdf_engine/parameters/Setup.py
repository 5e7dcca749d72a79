import logging
import numbers

from ..errors import InvalidParameters
from ..mpc import MPC
from .ParameterSet import ParameterSet


logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class Setup:
    """One-time construction of a ParameterSet and its precomputed table."""

    @staticmethod
    def setup(generator: int, table_modulus: int, t: int, kappa: int, gamma: int) -> ParameterSet:
        """Validate the parameters and build the precomputed table.

        The modulus G is taken from generator, and the table is
        C[i] = generator^(2^(kappa*gamma*i)) mod table_modulus for
        i in 0..=floor(t / (kappa*gamma)).

        Args:
            generator (int): Fixed generator, also used as the modulus G
            table_modulus (int): Modulus PrimeL of the table
            t (int): Delay exponent T
            kappa (int): Bits per exponent block
            gamma (int): Number of parallel workers

        Returns:
            ParameterSet: The fully populated, immutable parameter set

        Raises:
            InvalidParameters: If any parameter is non-positive
        """
        Setup._validate(generator, table_modulus, t, kappa, gamma)

        G = MPC.mpz(generator)
        prime_l = MPC.mpz(table_modulus)
        stride = kappa * gamma
        last_index = t // stride

        table = []
        for i in range(last_index + 1):
            exp = MPC.pow(TWO, stride * i)
            table.append(MPC.powmod(G, exp, prime_l))

        logger.debug(
            "Precomputed %d table entries (kappa=%d, gamma=%d, t=%d)",
            len(table), kappa, gamma, t,
        )
        return ParameterSet(G, prime_l, t, kappa, gamma, table)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _validate(generator: int, table_modulus: int, t: int, kappa: int, gamma: int) -> None:
        values = {
            "generator": generator,
            "table_modulus": table_modulus,
            "t": t,
            "kappa": kappa,
            "gamma": gamma,
        }
        for name, value in values.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidParameters(f"{name} must be an integer", context={name: value})
        if kappa * gamma <= 0:
            raise InvalidParameters(
                "kappa * gamma must be positive", context={"kappa": kappa, "gamma": gamma}
            )
        for name, value in values.items():
            if value <= 0:
                raise InvalidParameters(f"{name} must be positive", context={name: value})
