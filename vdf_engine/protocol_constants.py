# protocol_constants.py

PRIMALITY_ROUNDS = 20                   # Miller-Rabin rounds for the challenge prime
MAX_PRIME_SEARCH_ITERATIONS = 100000    # Odd candidates tried before giving up

DEFAULT_GENERATOR = 2       # Modulus G handed to Setup by the CLI
DEFAULT_TABLE_MODULUS = 101 # PrimeL - modulus of the precomputed table
DEFAULT_KAPPA = 2           # Bit width of each exponent block
DEFAULT_GAMMA = 2           # Number of parallel workers
DEFAULT_SECRET_ORDER = 101  # Trapdoor secret used by the CLI
