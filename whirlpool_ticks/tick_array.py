"""
Tick and Tick Array entities

A tick array is one on-chain chunk of the tick grid: 88 consecutive
initializable ticks starting at start_tick_index. Slot i holds the tick at
start_tick_index + i * tick_spacing.

Both types are immutable so a window built from them can be shared across
threads or cached.
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple

from .constants import TICK_ARRAY_SIZE, MAX_SWAP_TICK_ARRAYS, tick_array_span
from .math.ticks import get_tick_array_start_tick_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    """State of one grid point."""
    initialized: bool = False
    liquidity_net: int = 0           # Liquidity change when price crosses upward
    fee_growth_outside_a: int = 0    # Opaque, passed through
    fee_growth_outside_b: int = 0    # Opaque, passed through
    reward_growths_outside: Tuple[int, int, int] = (0, 0, 0)


@dataclass(frozen=True)
class TickArray:
    """Fixed-size chunk of ticks."""
    start_tick_index: int
    ticks: Tuple[Tick, ...] = field(repr=False)

    def __post_init__(self):
        # Accept any sequence (list from a decoder etc.) but store a tuple
        ticks = tuple(self.ticks)
        if len(ticks) != TICK_ARRAY_SIZE:
            raise ValueError(
                f"Tick array must hold exactly {TICK_ARRAY_SIZE} ticks, got {len(ticks)}"
            )
        object.__setattr__(self, "ticks", ticks)

    @classmethod
    def empty(cls, start_tick_index: int) -> "TickArray":
        """
        Zero-state array for a chunk that was never initialized on chain.

        Swaps can pass through such chunks; every tick is uninitialized with
        zero liquidity_net, so a search simply walks over it.
        """
        return cls(start_tick_index=start_tick_index, ticks=(Tick(),) * TICK_ARRAY_SIZE)

    @property
    def initialized_count(self) -> int:
        return sum(1 for tick in self.ticks if tick.initialized)


def get_swap_tick_array_start_indexes(
    tick_current_index: int,
    tick_spacing: int,
    a_to_b: bool
) -> Tuple[int, int, int]:
    """
    Start indexes of the tick arrays a swap walks through, in traversal order.

    a_to_b (price goes down): the array holding the current tick, then the
    two arrays below it.
    b_to_a (price goes up): the array holding tick_current_index + tick_spacing,
    then the two arrays above it. The shift keeps a current tick that sits
    exactly on the last slot of an array from pointing at the array it is
    about to leave.

    Args:
        tick_current_index: Pool's current tick index
        tick_spacing: Pool tick spacing
        a_to_b: Swap direction

    Returns:
        (first, second, third) start tick indexes

    Example:
        get_swap_tick_array_start_indexes(100, 16, a_to_b=True)   # (0, -1408, -2816)
        get_swap_tick_array_start_indexes(100, 16, a_to_b=False)  # (0, 1408, 2816)
    """
    shift = 0 if a_to_b else tick_spacing
    start = get_tick_array_start_tick_index(tick_current_index + shift, tick_spacing)
    step = -tick_array_span(tick_spacing) if a_to_b else tick_array_span(tick_spacing)

    start_indexes = tuple(start + i * step for i in range(MAX_SWAP_TICK_ARRAYS))
    logger.debug(
        f"Swap tick arrays for tick {tick_current_index} "
        f"({'a->b' if a_to_b else 'b->a'}): {start_indexes}"
    )
    return start_indexes
