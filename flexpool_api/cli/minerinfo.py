#!/usr/bin/env python3
"""
Print a report of a Flexpool mining wallet.

The report covers the unpaid balance, payout settings, round share, revenue
totals, active workers and the latest payments and mined blocks.
"""

import argparse
import logging
import sys
from datetime import datetime, timezone

from ..config import API_CONFIG, REPORT_CONFIG
from ..errors import FlexpoolError
from ..miner_client import MinerClient
from ..utils.converters import HashrateUnit, convert_hashrate, gwei_to_eth
from ..utils.logging_config import setup_logging
from . import positive_float

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Print Flexpool stats of a mining wallet")
    parser.add_argument("--address", default="", help="Mining wallet address")
    parser.add_argument("--timeout", type=positive_float, default=API_CONFIG["timeout"],
                        help="Request timeout in seconds (default: %(default)s)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def _format_time(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def _call(description: str, func, *args):
    """Run one API call, exiting with status 1 if it fails."""
    try:
        return func(*args)
    except FlexpoolError as e:
        logger.debug(f"Failed to get {description}", exc_info=True)
        print(f"Unable to get {description}: {str(e)}", file=sys.stderr)
        sys.exit(1)


def print_report(address: str, balance, details, round_share, daily_revenue,
                 total_paid, total_donated, workers, payments, blocks):
    """Print the wallet report to stdout."""
    print(f"Flexpool Miner '{address}' Stats\n-\n")
    print(f"Unpaid Balance: {gwei_to_eth(balance):.8f} eth")
    
    print(f"Min Payout Threshold: {gwei_to_eth(details.min_payout_threshold):.4f} eth \t\t "
          f"Donation Percent: {details.pool_donation:.4f}% \t "
          f"Round Share: {round_share:.8f}%")
    
    print(f"Estimated Daily Eth: {gwei_to_eth(daily_revenue):.8f} eth \t "
          f"Total Paid: {gwei_to_eth(total_paid):.8f} eth \t "
          f"Total Donated: {gwei_to_eth(total_donated):.8f} eth\n")
    
    print("Workers:")
    if workers:
        for worker in workers:
            effective_mhs = convert_hashrate(worker.effective_hashrate,
                                             HashrateUnit.HASHES, HashrateUnit.MEGA_HASHES)
            print(f"\t {worker.name} "
                  f"(effective hashrate: {effective_mhs}{HashrateUnit.MEGA_HASHES.symbol}) \t "
                  f"(valid: {worker.valid_shares}, stale: {worker.stale_shares}, "
                  f"invalid: {worker.invalid_shares})")
    else:
        print("\t None currently active.")
    
    print(f"\nLast {len(payments.data)} payments:")
    if payments.data:
        for payment in payments.data:
            print(f"\t Txn: {payment.txid} (amount: {gwei_to_eth(payment.amount):.8f} eth) \t "
                  f"{_format_time(payment.timestamp)}")
    else:
        print("\t No payments made.")
    
    print(f"\nLast {len(blocks.data)} blocks mined:")
    if blocks.data:
        for block in blocks.data:
            print(f"\t {block.number} (type: {block.type}) "
                  f"(reward: {gwei_to_eth(block.total_rewards):.8f}) \t "
                  f"{_format_time(block.timestamp)}")
    else:
        print("\t No blocks mined yet.")


def main(argv=None):
    """Main function."""
    args = parse_args(argv)
    setup_logging("flexpool_api", level=getattr(logging, args.log_level))
    
    if not args.address:
        print("No address given, exiting.", file=sys.stderr)
        sys.exit(1)
    
    address = args.address
    
    with MinerClient(timeout=args.timeout) as client:
        balance = _call("wallet balance", client.get_balance, address)
        details = _call("wallet details", client.get_details, address)
        round_share = _call("round share", client.get_round_share, address)
        daily_revenue = _call("estimated daily revenue", client.get_estimated_daily_revenue, address)
        total_paid = _call("total paid", client.get_total_paid, address)
        total_donated = _call("total donated", client.get_total_donated, address)
        workers = _call("worker listing", client.get_workers, address)
        payments = _call("latest payments", client.get_payments, address, REPORT_CONFIG["payments_page"])
        blocks = _call("latest blocks mined", client.get_blocks, address, REPORT_CONFIG["blocks_page"])
    
    print_report(address, balance, details, round_share, daily_revenue,
                 total_paid, total_donated, workers, payments, blocks)


if __name__ == "__main__":
    main()
