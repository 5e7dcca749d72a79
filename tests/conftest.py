import pytest
from gmpy2 import mpz

from vdf_engine.parameters import Setup


# SHA-256 of the canonical encoding of 12345 (bytes 0x30 0x39)
G_12345 = mpz(int("3514acf61732f662da19625f7fe781c3e483f2dce8506012f3bb393f5003e105", 16))


@pytest.fixture
def params():
    """Fixture for the reference parameters: generator 2, table modulus 101, T=16, kappa=2, gamma=2."""
    return Setup.setup(2, 101, 16, 2, 2)
