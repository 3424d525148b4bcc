"""
Tick Window

Logical view over three adjacent tick arrays. A swap simulation builds one
window per query, then asks it for ticks by absolute index or for the
nearest initialized tick in either direction.

    |---- array 0 ----|---- array 1 ----|---- array 2 ----|
    ^ start_index                                         ^ end_index (exclusive)

Each array spans 88 * tick_spacing tick indexes. Arrays may be passed in
any order; the window sorts them and checks that they tile one gapless
range.
"""

import logging
from typing import NamedTuple, Tuple

from .constants import TICK_ARRAY_SIZE, tick_array_span
from .math.ticks import get_next_initializable_tick_index, get_prev_initializable_tick_index
from .tick_array import Tick, TickArray

logger = logging.getLogger(__name__)

WINDOW_TICK_ARRAY_COUNT = 3


# ── Exceptions ──

class TickWindowError(Exception):
    """Base error for tick window construction and lookup."""
    pass


class NonContiguousWindowError(TickWindowError):
    """The tick arrays do not tile one evenly spaced, gapless window."""
    def __init__(self, start_indexes: Tuple[int, int, int], expected_gap: int):
        self.start_indexes = start_indexes
        self.expected_gap = expected_gap
        super().__init__(
            f"Tick arrays are not evenly spaced: start indexes {list(start_indexes)}, "
            f"expected gap {expected_gap}"
        )


class IndexOutOfWindowError(TickWindowError):
    """Tick index lies before the window start or at/after its end."""
    def __init__(self, tick_index: int, start_index: int, end_index: int):
        self.tick_index = tick_index
        self.start_index = start_index
        self.end_index = end_index
        super().__init__(
            f"Tick index {tick_index} out of bounds [{start_index}, {end_index})"
        )


class MisalignedIndexError(TickWindowError):
    """Tick index is not a multiple of the tick spacing."""
    def __init__(self, tick_index: int, tick_spacing: int):
        self.tick_index = tick_index
        self.tick_spacing = tick_spacing
        super().__init__(
            f"Invalid tick index {tick_index}: not a multiple of tick spacing {tick_spacing}"
        )


# ── Results ──

class InitializedTick(NamedTuple):
    """Search result: absolute tick index and the tick stored there."""
    tick_index: int
    tick: Tick


def order_tick_arrays(
    one: TickArray,
    two: TickArray,
    three: TickArray
) -> Tuple[TickArray, TickArray, TickArray]:
    """Sort exactly three tick arrays by start_tick_index."""
    first = one.start_tick_index
    second = two.start_tick_index
    third = three.start_tick_index

    if first < second:
        if second < third:
            return one, two, three
        elif first < third:
            return one, three, two
        else:
            return three, one, two
    elif first < third:
        return two, one, three
    elif second < third:
        return two, three, one
    else:
        return three, two, one


class TickWindow:
    """
    Validated, immutable window over three contiguous tick arrays.

    Usage:
        window = TickWindow(array_b, array_a, array_c, tick_spacing=64)

        tick = window.tick(5632)
        tick_index, tick = window.next_initialized_tick(current_tick)

    Raises on construction:
        ValueError: tick_spacing is not positive
        NonContiguousWindowError: arrays are not adjacent at this spacing
    """

    __slots__ = ("_tick_arrays", "_tick_spacing")

    def __init__(self, one: TickArray, two: TickArray, three: TickArray, tick_spacing: int):
        if tick_spacing <= 0:
            raise ValueError(f"Tick spacing must be positive, got {tick_spacing}")

        first, second, third = order_tick_arrays(one, two, three)

        required_gap = tick_array_span(tick_spacing)
        first_second_gap = abs(second.start_tick_index - first.start_tick_index)
        second_third_gap = abs(third.start_tick_index - second.start_tick_index)
        if first_second_gap != required_gap or second_third_gap != required_gap:
            start_indexes = (first.start_tick_index, second.start_tick_index, third.start_tick_index)
            logger.warning(
                f"Rejecting tick window {list(start_indexes)} "
                f"at tick spacing {tick_spacing} (gap {required_gap})"
            )
            raise NonContiguousWindowError(start_indexes, required_gap)

        self._tick_arrays = (first, second, third)
        self._tick_spacing = tick_spacing
        logger.debug(
            f"Tick window [{self.start_index}, {self.end_index}) "
            f"spacing={tick_spacing}"
        )

    def __repr__(self) -> str:
        return (
            f"TickWindow(start_index={self.start_index}, end_index={self.end_index}, "
            f"tick_spacing={self._tick_spacing})"
        )

    # ----- window geometry -----
    @property
    def tick_arrays(self) -> Tuple[TickArray, TickArray, TickArray]:
        return self._tick_arrays

    @property
    def tick_spacing(self) -> int:
        return self._tick_spacing

    @property
    def start_index(self) -> int:
        return self._tick_arrays[0].start_tick_index

    @property
    def end_index(self) -> int:
        return self.start_index + WINDOW_TICK_ARRAY_COUNT * tick_array_span(self._tick_spacing)

    def contains(self, tick_index: int) -> bool:
        """True if tick(tick_index) would succeed."""
        return (
            self.start_index <= tick_index < self.end_index
            and tick_index % self._tick_spacing == 0
        )

    # ----- addressed lookup -----
    def tick(self, tick_index: int) -> Tick:
        """
        Tick stored at an absolute tick index.

        Args:
            tick_index: Absolute, spacing-aligned tick index inside the window

        Returns:
            The Tick at that grid position

        Raises:
            IndexOutOfWindowError: tick_index outside [start_index, end_index)
            MisalignedIndexError: tick_index not a multiple of tick_spacing
        """
        start_index = self.start_index
        end_index = self.end_index
        if tick_index < start_index or tick_index >= end_index:
            raise IndexOutOfWindowError(tick_index, start_index, end_index)
        if tick_index % self._tick_spacing != 0:
            raise MisalignedIndexError(tick_index, self._tick_spacing)

        array_offset = (tick_index - start_index) // tick_array_span(self._tick_spacing)
        tick_array = self._tick_arrays[array_offset]
        slot = (tick_index - tick_array.start_tick_index) // self._tick_spacing
        return tick_array.ticks[slot]

    # ----- directional search -----
    def next_initialized_tick(self, tick_index: int) -> InitializedTick:
        """
        Nearest initialized tick strictly above tick_index.

        tick_index may be unaligned and may itself be initialized; the search
        always moves at least one grid step.

        Raises:
            IndexOutOfWindowError: no initialized tick before the window end
        """
        return self._search(tick_index, get_next_initializable_tick_index)

    def prev_initialized_tick(self, tick_index: int) -> InitializedTick:
        """
        Nearest initialized tick strictly below tick_index.

        Raises:
            IndexOutOfWindowError: no initialized tick at or after the window start
        """
        return self._search(tick_index, get_prev_initializable_tick_index)

    def _search(self, tick_index: int, step) -> InitializedTick:
        span = tick_array_span(self._tick_spacing)
        current = tick_index
        # Every step visits a new grid point; the window holds 3 * 88 of them
        for _ in range(WINDOW_TICK_ARRAY_COUNT * TICK_ARRAY_SIZE + 1):
            candidate = step(current, self._tick_spacing)
            tick = self.tick(candidate)
            if tick.initialized:
                return InitializedTick(candidate, tick)
            if (candidate - self.start_index) // span != (current - self.start_index) // span:
                logger.debug(f"Search from {tick_index} crossed into tick array at {candidate}")
            current = candidate

        raise IndexOutOfWindowError(current, self.start_index, self.end_index)
