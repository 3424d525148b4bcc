"""
Whirlpool protocol constants

Values owned by the on-chain program. The tick window only consumes them;
global bounds are the caller's responsibility.
"""

# Number of ticks stored in one tick array account
TICK_ARRAY_SIZE = 88

# Tick arrays a single swap may touch
MAX_SWAP_TICK_ARRAYS = 3

# Global tick range
MIN_TICK_INDEX = -443636
MAX_TICK_INDEX = 443636

# Sqrt price range (Q64.64)
MIN_SQRT_PRICE = 4295048016
MAX_SQRT_PRICE = 79226673515401279992447579055

# Pools with tick spacing at or above this threshold only accept full range positions
FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD = 32768  # 2^15

# Default tick spacings enabled through the Orca config
SUPPORTED_TICK_SPACINGS = (1, 2, 4, 8, 16, 64, 96, 128, 256, 32896)


def is_supported_tick_spacing(tick_spacing: int) -> bool:
    """Check whether tick_spacing is one of the default supported spacings."""
    return tick_spacing in SUPPORTED_TICK_SPACINGS


def is_full_range_only(tick_spacing: int) -> bool:
    """
    Check whether a pool with this tick spacing is full range only.

    Args:
        tick_spacing: Pool tick spacing

    Returns:
        True if the program rejects non full range positions for the pool
    """
    return tick_spacing >= FULL_RANGE_ONLY_TICK_SPACING_THRESHOLD


def tick_array_span(tick_spacing: int) -> int:
    """Number of tick indexes covered by one tick array."""
    return TICK_ARRAY_SIZE * tick_spacing
