#!/usr/bin/env python3
"""
Print pool-wide Flexpool statistics.

Hashrates are shown in GH/s. The PPLNS share window, uncle rate and block
averages are derived from a sample of the pool's most recent blocks.
"""

import argparse
import logging
import sys

from ..config import API_CONFIG, REPORT_CONFIG
from ..errors import FlexpoolError
from ..pool_client import PoolClient
from ..utils.converters import HashrateUnit, convert_hashrate, gwei_to_eth
from ..utils.logging_config import setup_logging
from ..utils.pool_stats import (
    calculate_average_block_reward,
    calculate_average_blocks_per_day,
    calculate_pplns_share_window,
    calculate_uncle_rate
)
from . import positive_float

logger = logging.getLogger(__name__)

DISPLAY_UNIT = HashrateUnit.GIGA_HASHES


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Print Flexpool pool stats")
    parser.add_argument("--pages", type=int, default=REPORT_CONFIG["block_pages"],
                        help="Pages of recent blocks to sample (default: %(default)s)")
    parser.add_argument("--delay", type=float, default=REPORT_CONFIG["page_delay_seconds"],
                        help="Seconds to wait between page requests (default: %(default)s)")
    parser.add_argument("--timeout", type=positive_float, default=API_CONFIG["timeout"],
                        help="Request timeout in seconds (default: %(default)s)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def seconds_to_hhmmss(seconds: int) -> str:
    """Format a number of seconds as HH:MM:SS."""
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _display_hashrate(hashrate: int) -> str:
    return f"{convert_hashrate(hashrate, HashrateUnit.HASHES, DISPLAY_UNIT)}{DISPLAY_UNIT.symbol}"


def main(argv=None):
    """Main function."""
    args = parse_args(argv)
    setup_logging("flexpool_api", level=getattr(logging, args.log_level))
    
    try:
        with PoolClient(timeout=args.timeout) as client:
            hashrate = client.get_hashrate()
            miners_online = client.get_miners_online()
            workers_online = client.get_workers_online()
            
            logger.info(f"Sampling {args.pages} pages of pool blocks")
            blocks = client.get_recent_blocks(pages=args.pages, throttle_seconds=args.delay)
        
        pplns_window = calculate_pplns_share_window(
            REPORT_CONFIG["pplns_n"],
            REPORT_CONFIG["share_difficulty"],
            hashrate.total
        )
        uncle_rate = calculate_uncle_rate(blocks)
        average_reward = calculate_average_block_reward(blocks)
        blocks_per_day = calculate_average_blocks_per_day(blocks)
    except (FlexpoolError, ValueError) as e:
        logger.debug("Pool report failed", exc_info=True)
        print(f"Unable to build pool report: {str(e)}", file=sys.stderr)
        sys.exit(1)
    
    print("Flexpool Stats\n-\n")
    print(f"Miners: {miners_online} (Workers: {workers_online})\n")
    print(f"Hashrate: {_display_hashrate(hashrate.total)}")
    for region, region_hashrate in hashrate.regions.items():
        print(f"\t{region.capitalize()}: {_display_hashrate(region_hashrate)}")
    print()
    
    print(f"PPLNS share window: {seconds_to_hhmmss(pplns_window)} ({pplns_window})")
    print(f"Uncle rate: {uncle_rate * 100:.2f}%")
    print(f"Average blocks per day: {blocks_per_day:.2f} "
          f"(average reward: {gwei_to_eth(average_reward):.8f} eth)")
    print(f"\t* Averages and uncle rate are over a {len(blocks)} block period")


if __name__ == "__main__":
    main()
