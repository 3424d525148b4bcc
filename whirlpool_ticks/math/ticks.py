"""
Whirlpool Tick Mathematics

Formulas:
- price(i) = 1.0001^i
- sqrt_price = sqrt(price) * 2^64  (Q64.64)

Prices are token B per token A. Token decimals shift the human price:
    price_human = price_raw * 10^(decimals_a - decimals_b)

Grid:
- only ticks that are multiples of tick_spacing can be initialized
- tick array k covers [k * 88 * tick_spacing, (k + 1) * 88 * tick_spacing)
"""

import math
from decimal import Decimal, getcontext

from ..constants import (
    MIN_TICK_INDEX,
    MAX_TICK_INDEX,
    MIN_SQRT_PRICE,
    MAX_SQRT_PRICE,
    tick_array_span,
)

# High precision for sqrt price conversions
getcontext().prec = 50

Q64 = 2 ** 64
TICK_BASE = Decimal("1.0001")


def get_initializable_tick_index(tick_index: int, tick_spacing: int, round_up: bool = False) -> int:
    """
    Align a tick index to the tick spacing grid.

    Args:
        tick_index: Source tick index
        tick_spacing: Pool tick spacing
        round_up: False = round towards -inf, True = round towards +inf

    Returns:
        Aligned tick index (the input itself when already aligned)
    """
    if tick_index % tick_spacing == 0:
        return tick_index

    # Floor division is correct for negative ticks as well
    if round_up:
        return ((tick_index // tick_spacing) + 1) * tick_spacing
    return (tick_index // tick_spacing) * tick_spacing


def get_next_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    """
    Smallest aligned tick index strictly greater than tick_index.

    Python's % yields a remainder in [0, tick_spacing), so an aligned input
    advances by one full step and an unaligned one rounds up.
    """
    return tick_index + tick_spacing - (tick_index % tick_spacing)


def get_prev_initializable_tick_index(tick_index: int, tick_spacing: int) -> int:
    """Largest aligned tick index strictly smaller than tick_index."""
    remainder = tick_index % tick_spacing
    if remainder == 0:
        return tick_index - tick_spacing
    return tick_index - remainder


def get_tick_array_start_tick_index(tick_index: int, tick_spacing: int) -> int:
    """
    Start tick index of the tick array that contains tick_index.

    Args:
        tick_index: Any tick index (aligned or not)
        tick_spacing: Pool tick spacing

    Returns:
        Start index, a multiple of 88 * tick_spacing

    Example:
        get_tick_array_start_tick_index(1500, 16)  # 1408
        get_tick_array_start_tick_index(-1, 16)    # -1408
    """
    span = tick_array_span(tick_spacing)
    return (tick_index // span) * span


def is_tick_index_in_bounds(tick_index: int) -> bool:
    return MIN_TICK_INDEX <= tick_index <= MAX_TICK_INDEX


def is_tick_initializable(tick_index: int, tick_spacing: int) -> bool:
    return tick_index % tick_spacing == 0


def get_full_range_tick_indexes(tick_spacing: int) -> tuple[int, int]:
    """
    Lowest and highest initializable tick indexes for a pool.

    Returns:
        (tick_lower, tick_upper)
    """
    tick_lower = get_initializable_tick_index(MIN_TICK_INDEX, tick_spacing, round_up=True)
    tick_upper = get_initializable_tick_index(MAX_TICK_INDEX, tick_spacing, round_up=False)
    return tick_lower, tick_upper


def _clamp_sqrt_price(sqrt_price: int) -> int:
    return max(MIN_SQRT_PRICE, min(MAX_SQRT_PRICE, sqrt_price))


def tick_index_to_sqrt_price(tick_index: int) -> int:
    """
    Convert a tick index to a Q64.64 sqrt price.

    Args:
        tick_index: Tick index

    Returns:
        sqrt_price, clamped to [MIN_SQRT_PRICE, MAX_SQRT_PRICE]
    """
    sqrt_price = (TICK_BASE ** tick_index).sqrt() * Q64
    return _clamp_sqrt_price(int(sqrt_price))


def price_to_sqrt_price(price: float, decimals_a: int = 0, decimals_b: int = 0) -> int:
    """
    Convert a human price to a Q64.64 sqrt price.

    Args:
        price: Price of token A in token B
        decimals_a: Token A decimals
        decimals_b: Token B decimals

    Returns:
        sqrt_price (integer)
    """
    if price <= 0:
        raise ValueError("Price must be positive")

    raw_price = Decimal(price) * Decimal(10) ** (decimals_b - decimals_a)
    sqrt_price = raw_price.sqrt() * Q64
    return _clamp_sqrt_price(int(sqrt_price))


def sqrt_price_to_price(sqrt_price: int, decimals_a: int = 0, decimals_b: int = 0) -> float:
    """
    Convert a Q64.64 sqrt price to a human price.

    price = (sqrt_price / 2^64)^2 * 10^(decimals_a - decimals_b)
    """
    raw_price = (Decimal(sqrt_price) / Q64) ** 2
    return float(raw_price * Decimal(10) ** (decimals_a - decimals_b))


def tick_index_to_price(tick_index: int, decimals_a: int = 0, decimals_b: int = 0) -> float:
    """
    Convert a tick index to a human price.

    Example:
        # SOL (9 decimals) / USDC (6 decimals)
        tick_index_to_price(-18000, 9, 6)  # ~165.3 USDC per SOL
    """
    return (1.0001 ** tick_index) * (10 ** (decimals_a - decimals_b))


def price_to_tick_index(price: float, decimals_a: int = 0, decimals_b: int = 0) -> int:
    """
    Convert a human price to a tick index.

    i = floor(log(price_raw) / log(1.0001))

    Args:
        price: Price of token A in token B
        decimals_a: Token A decimals
        decimals_b: Token B decimals

    Returns:
        Tick index clamped to [MIN_TICK_INDEX, MAX_TICK_INDEX]
    """
    if price <= 0:
        raise ValueError("Price must be positive")

    raw_price = price * (10 ** (decimals_b - decimals_a))
    tick_index = math.floor(math.log(raw_price) / math.log(1.0001))
    return max(MIN_TICK_INDEX, min(MAX_TICK_INDEX, tick_index))
