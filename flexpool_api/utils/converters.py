"""
Hashrate and currency unit conversions.

Hashrates are converted with integer arithmetic: the input is scaled up to
hashes per second and then divided down to the output unit, truncating any
remainder. Down-conversions therefore lose precision and a chain of
conversions is not always invertible (1 H/s is 0 GH/s).
"""

from enum import IntEnum
from numbers import Real

GWEI_PER_ETH = 10 ** 9


class HashrateUnit(IntEnum):
    """Units for measuring hashrates."""
    HASHES = 0
    KILO_HASHES = 1
    MEGA_HASHES = 2
    GIGA_HASHES = 3
    TERA_HASHES = 4
    PETA_HASHES = 5
    
    @property
    def exponent(self) -> int:
        """Power of ten relative to hashes per second."""
        return self.value * 3
    
    @property
    def symbol(self) -> str:
        return ("H/s", "KH/s", "MH/s", "GH/s", "TH/s", "PH/s")[self.value]


def convert_hashrate(hashrate: int, input_unit: HashrateUnit, output_unit: HashrateUnit) -> int:
    """
    Convert a hashrate between units.
    
    Args:
        hashrate: Non-negative hashrate in ``input_unit``
        input_unit: Unit of ``hashrate``
        output_unit: Unit to convert to
    
    Returns:
        Hashrate in ``output_unit``, truncated towards zero
    
    Raises:
        ValueError: If the hashrate is negative or a unit is not a HashrateUnit
    """
    input_unit = HashrateUnit(input_unit)
    output_unit = HashrateUnit(output_unit)
    
    hashrate = int(hashrate)
    if hashrate < 0:
        raise ValueError(f"Hashrate must be non-negative, got {hashrate}")
    
    hashes_per_second = hashrate * 10 ** input_unit.exponent
    return hashes_per_second // 10 ** output_unit.exponent


def gwei_to_eth(gwei: Real) -> float:
    """Convert a gwei amount to eth."""
    return gwei / GWEI_PER_ETH


def eth_to_gwei(eth: Real) -> int:
    """
    Convert an eth amount to gwei.
    
    The result is rounded to the nearest gwei, so that
    ``eth_to_gwei(gwei_to_eth(x)) == x`` for amounts up to 10**15 gwei.
    """
    return int(round(eth * GWEI_PER_ETH))
