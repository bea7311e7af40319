"""Fixed parameters of the Stable2 well function.

These mirror the on-chain constants and must not be tuned: changing any of
them changes every price the pool quotes.
"""

# Number of tokens in the pool. Only two-token pools are modelled.
N_COINS = 2

# Precision of the amplification coefficient inside the Newton update
A_PRECISION = 100

# Decimals every reserve is normalised to before any math runs
POOL_PRECISION_DECIMALS = 18

# Prices and rates are 6-decimal fixed point (1.0 == 1_000_000)
PRICE_PRECISION = 10**6

# Two prices within this many PRICE_PRECISION units are equal (0.001%)
PRICE_THRESHOLD = 10

# Hard ceiling on every iterative loop
MAX_ITERATIONS = 255

# Encoded well data is two ABI uint256 words
WELL_DATA_LENGTH = 64

NAME = "Stable2"
SYMBOL = "S2"
