"""
Whirlpool tick window engine.

Validated windows over three adjacent tick arrays with O(1) tick lookup
and nearest-initialized-tick search for swap simulation.
"""

from .constants import (
    TICK_ARRAY_SIZE,
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    MIN_SQRT_PRICE,
    MAX_SQRT_PRICE,
    SUPPORTED_TICK_SPACINGS,
)
from .tick_array import Tick, TickArray, get_swap_tick_array_start_indexes
from .sequence import (
    TickWindow,
    InitializedTick,
    TickWindowError,
    NonContiguousWindowError,
    IndexOutOfWindowError,
    MisalignedIndexError,
)

__version__ = "0.1.0"
