"""
Shared fixtures for all tests.
"""

import pytest

from whirlpool_ticks.constants import TICK_ARRAY_SIZE
from whirlpool_ticks.tick_array import Tick, TickArray
from whirlpool_ticks.sequence import TickWindow


# Reference layout: spacing 16, arrays at 0 / 1408 / 2816
TICK_SPACING = 16
ARRAY_SPAN = TICK_ARRAY_SIZE * TICK_SPACING  # 1408


def odd_slot_ticks():
    """Odd slots initialized, liquidity_net == slot for initialized ticks."""
    return [
        Tick(initialized=True, liquidity_net=slot) if slot & 1 == 1 else Tick()
        for slot in range(TICK_ARRAY_SIZE)
    ]


def make_tick_array(start_tick_index: int, ticks=None) -> TickArray:
    if ticks is None:
        ticks = odd_slot_ticks()
    return TickArray(start_tick_index=start_tick_index, ticks=ticks)


@pytest.fixture
def tick_array_factory():
    """Factory for tick arrays (odd slots initialized by default)."""
    return make_tick_array


@pytest.fixture
def reference_arrays():
    """Three contiguous arrays at 0, 1408, 2816."""
    return (
        make_tick_array(0),
        make_tick_array(ARRAY_SPAN),
        make_tick_array(ARRAY_SPAN * 2),
    )


@pytest.fixture
def window(reference_arrays):
    """TickWindow over the reference arrays."""
    return TickWindow(*reference_arrays, tick_spacing=TICK_SPACING)


@pytest.fixture
def unique_arrays():
    """
    Three contiguous arrays at -1408, 0, 1408 where every tick is distinct.

    fee_growth_outside_a encodes the absolute tick index so lookups can be
    checked for identity.
    """
    arrays = []
    for start in (-ARRAY_SPAN, 0, ARRAY_SPAN):
        ticks = [
            Tick(
                initialized=slot % 3 == 0,
                liquidity_net=(start + slot) if slot % 3 == 0 else 0,
                fee_growth_outside_a=start + slot * TICK_SPACING,
            )
            for slot in range(TICK_ARRAY_SIZE)
        ]
        arrays.append(TickArray(start_tick_index=start, ticks=ticks))
    return tuple(arrays)


@pytest.fixture
def empty_window():
    """Window with no initialized ticks at all."""
    return TickWindow(
        TickArray.empty(0),
        TickArray.empty(ARRAY_SPAN),
        TickArray.empty(ARRAY_SPAN * 2),
        tick_spacing=TICK_SPACING,
    )
