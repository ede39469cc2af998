# _utils/random_source.py

import random
from collections.abc import Callable

# (low, high) -> uniform integer in the inclusive range [low, high]
RandomSource = Callable[[int, int], int]


def default_random_source() -> RandomSource:
    """
    Return the process-wide uniform integer source.

    Draws from the module-level generator of the `random` module, so seeding
    it with `random.seed` affects every generator using the default source.

    Returns:
        RandomSource: Callable drawing a uniform integer in [low, high].
    """
    return random.randint


def jitter_bound(upper: float) -> int:
    """
    Convert a floating-point jitter ceiling to an inclusive integer bound.

    Truncates toward zero. Non-positive and NaN ceilings collapse to zero so
    that a degenerate multiplier shrinks the range instead of failing.

    Returns:
        int: Non-negative inclusive upper bound for the jitter draw.
    """
    if not upper > 0:
        return 0
    return int(upper)
