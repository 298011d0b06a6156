"""
Unit conversion and pool statistics helpers.
"""

from .converters import HashrateUnit, convert_hashrate, gwei_to_eth, eth_to_gwei
from .pool_stats import (
    calculate_uncle_rate,
    calculate_average_block_reward,
    calculate_average_blocks_per_day,
    calculate_expected_round_time,
    calculate_pplns_share_window
)

__all__ = [
    'HashrateUnit',
    'convert_hashrate',
    'gwei_to_eth',
    'eth_to_gwei',
    'calculate_uncle_rate',
    'calculate_average_block_reward',
    'calculate_average_blocks_per_day',
    'calculate_expected_round_time',
    'calculate_pplns_share_window'
]
