"""
Pool statistics derived from samples of mined blocks.

All hashrate arguments must share one unit; no unit checking is done here.
Every function raises InsufficientData instead of dividing by zero.
"""

from typing import Sequence

from ..errors import InsufficientData
from ..schemas import Block

SECONDS_PER_DAY = 60 * 60 * 24
UNCLE_BLOCK_TYPE = "uncle"


def _require_blocks(blocks: Sequence[Block]) -> None:
    if not blocks:
        raise InsufficientData("At least one block is required")


def calculate_expected_round_time(
    network_hashrate: float,
    pool_hashrate: float,
    average_block_time: float
) -> float:
    """
    Calculate the expected round time in seconds.
    
    Args:
        network_hashrate: Hashrate of the whole network
        pool_hashrate: Hashrate of the pool, in the same unit
        average_block_time: Average network block time in seconds
    
    Returns:
        Expected seconds between blocks found by the pool
    
    Raises:
        InsufficientData: If the pool hashrate is zero
    """
    if pool_hashrate <= 0:
        raise InsufficientData(f"Pool hashrate must be positive, got {pool_hashrate}")
    
    return network_hashrate / pool_hashrate * average_block_time


def calculate_pplns_share_window(n: int, share_difficulty: int, pool_hashrate: int) -> int:
    """
    Calculate how many seconds it takes for the last N shares to expire.
    
    Share difficulty and pool hashrate must share a unit (e.g. hashes and
    hashes per second).
    
    Args:
        n: Number of shares in the PPLNS window
        share_difficulty: Difficulty of a single share
        pool_hashrate: Current pool hashrate
    
    Returns:
        Length of the share window in whole seconds
    
    Raises:
        InsufficientData: If the pool hashrate is zero
    """
    if pool_hashrate <= 0:
        raise InsufficientData(f"Pool hashrate must be positive, got {pool_hashrate}")
    
    return (n * share_difficulty) // pool_hashrate


def calculate_uncle_rate(blocks: Sequence[Block]) -> float:
    """Return the fraction (0.0 - 1.0) of blocks that are uncles."""
    _require_blocks(blocks)
    
    uncle_blocks = sum(1 for block in blocks if block.type == UNCLE_BLOCK_TYPE)
    return uncle_blocks / len(blocks)


def calculate_average_block_reward(blocks: Sequence[Block]) -> float:
    """Return the mean total reward per block, in gwei."""
    _require_blocks(blocks)
    
    return sum(block.total_rewards for block in blocks) / len(blocks)


def calculate_average_blocks_per_day(blocks: Sequence[Block]) -> float:
    """
    Calculate the number of blocks found per day from the blocks' round times.
    
    Elapsed days are kept fractional, so samples spanning less than a day
    are still valid.
    
    Raises:
        InsufficientData: If there are no blocks or their round times sum to zero
    """
    _require_blocks(blocks)
    
    round_time_total = sum(block.round_time for block in blocks)
    if round_time_total == 0:
        raise InsufficientData("Blocks have no elapsed round time")
    
    return len(blocks) / (round_time_total / SECONDS_PER_DAY)
