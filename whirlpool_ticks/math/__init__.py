from .ticks import (
    get_initializable_tick_index,
    get_next_initializable_tick_index,
    get_prev_initializable_tick_index,
    get_tick_array_start_tick_index,
    get_full_range_tick_indexes,
    is_tick_index_in_bounds,
    is_tick_initializable,
    tick_index_to_sqrt_price,
    price_to_sqrt_price,
    sqrt_price_to_price,
    tick_index_to_price,
    price_to_tick_index,
)
