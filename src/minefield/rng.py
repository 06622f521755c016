"""
Seeded random number generator for the daily puzzle.

A 32-bit linear congruential generator seeded from a string hash. The
output sequence depends only on the seed string, so every client and the
server compute the same board for the same seed.
"""
import math


# ============================================================================
# Constants
# ============================================================================

MODULUS = 2 ** 32
MULTIPLIER = 1664525
INCREMENT = 1013904223


def hash_seed(seed: str) -> int:
    """
    Hash a string into a non-negative 32-bit seed.

    Polynomial rolling hash (``hash * 31 + unit``) over UTF-16 code
    units, wrapped to a signed 32-bit integer after every step, and
    returned as its absolute value.
    """
    value = 0
    data = seed.encode("utf-16-le")
    for index in range(0, len(data), 2):
        unit = data[index] | (data[index + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 2 ** 31:
        value -= MODULUS
    return abs(value)


class SeededRandom:
    """
    Deterministic pseudo-random stream from a string seed.

    Example:
        >>> rng = SeededRandom("daily-2024-01-01")
        >>> rng.next_int(0, 16)
        13
    """

    def __init__(self, seed: str) -> None:
        self.seed = hash_seed(seed)

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self.seed = (self.seed * MULTIPLIER + INCREMENT) % MODULUS
        return self.seed / MODULUS

    def next_int(self, minimum: int, maximum: int) -> int:
        """Return an integer in [minimum, maximum)."""
        return math.floor(self.next() * (maximum - minimum)) + minimum
