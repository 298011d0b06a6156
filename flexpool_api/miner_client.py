"""
Flexpool Miner API Client

This module provides a client for the /miner/{address} endpoints of the
Flexpool API: balances, hashrate statistics, workers, payments and blocks
of a single mining wallet.
"""

import logging
from typing import List

from .base import BaseAPIClient, Endpoint
from .schemas import (
    BlockCount,
    BlockPage,
    ChartData,
    CurrentStats,
    DailyStats,
    MinerDetails,
    MinerPaymentChart,
    MinerWorker,
    MinerWorkerCount,
    PaymentPage,
    Stats,
    WireFloat,
    WireInt
)

logger = logging.getLogger(__name__)


class MinerClient(BaseAPIClient):
    """
    Client for the miner endpoints of the Flexpool API.
    
    Every method takes the mining wallet address and makes exactly one
    request. Amounts are returned in gwei and hashrates in hashes per second.
    """
    
    def _get(self, address: str, method: str, target, params=()):
        if not address:
            raise ValueError("Miner address is required")
        return self._fetch(Endpoint.MINER, address, method, target, params)
    
    def _get_list(self, address: str, method: str, model, allow_null: bool = False):
        if not address:
            raise ValueError("Miner address is required")
        return self._fetch_list(Endpoint.MINER, address, method, model, allow_null=allow_null)
    
    def get_balance(self, address: str) -> int:
        """
        Get the unpaid balance of a wallet.
        
        Args:
            address: Mining wallet address
        
        Returns:
            Balance in gwei
        
        Raises:
            FlexpoolError: If the request or decoding fails
        """
        return self._get(address, "balance", WireInt)
    
    def get_current(self, address: str) -> CurrentStats:
        """Get the current effective and reported hashrate of a wallet."""
        return self._get(address, "current", CurrentStats)
    
    def get_daily(self, address: str) -> DailyStats:
        """Get hashrate and share totals of a wallet over the last 24 hours."""
        return self._get(address, "daily", DailyStats)
    
    def get_stats(self, address: str) -> Stats:
        """Get the current and daily stats of a wallet."""
        return self._get(address, "stats", Stats)
    
    def get_worker_count(self, address: str) -> MinerWorkerCount:
        """Get the online and offline worker counts of a wallet."""
        return self._get(address, "workerCount", MinerWorkerCount)
    
    def get_workers(self, address: str) -> List[MinerWorker]:
        """
        Get the workers of a wallet.
        
        Args:
            address: Mining wallet address
        
        Returns:
            List of workers, empty if the wallet has none
        
        Raises:
            FlexpoolError: If the request or decoding fails
        """
        return self._get_list(address, "workers", MinerWorker, allow_null=True)
    
    def get_chart(self, address: str) -> List[ChartData]:
        """Get the hashrate and share chart of a wallet."""
        return self._get_list(address, "chart", ChartData)
    
    def get_payments(self, address: str, page: int = 0) -> PaymentPage:
        """
        Get a page of payments made to a wallet.
        
        Args:
            address: Mining wallet address
            page: Zero-based page number
        
        Returns:
            PaymentPage whose data is empty when there are no payments
        
        Raises:
            ValueError: If the page number is invalid
            FlexpoolError: If the request or decoding fails
        """
        return self._get(address, "payments", PaymentPage, [self._page_param(page)])
    
    def get_payment_count(self, address: str) -> int:
        """Get the number of payments made to a wallet."""
        return self._get(address, "paymentCount", WireInt)
    
    def get_payments_chart(self, address: str) -> List[MinerPaymentChart]:
        """Get the payment history chart of a wallet."""
        return self._get_list(address, "paymentsChart", MinerPaymentChart)
    
    def get_blocks(self, address: str, page: int = 0) -> BlockPage:
        """
        Get a page of blocks mined by a wallet.
        
        Args:
            address: Mining wallet address
            page: Zero-based page number
        
        Returns:
            BlockPage whose data is empty when no blocks were mined
        
        Raises:
            ValueError: If the page number is invalid
            FlexpoolError: If the request or decoding fails
        """
        return self._get(address, "blocks", BlockPage, [self._page_param(page)])
    
    def get_block_count(self, address: str) -> BlockCount:
        """Get the confirmed and unconfirmed block counts of a wallet."""
        return self._get(address, "blockCount", BlockCount)
    
    def get_details(self, address: str) -> MinerDetails:
        """Get the payout settings and account details of a wallet."""
        return self._get(address, "details", MinerDetails)
    
    def get_estimated_daily_revenue(self, address: str) -> int:
        """Get the estimated daily revenue of a wallet in gwei."""
        return self._get(address, "estimatedDailyRevenue", WireInt)
    
    def get_round_share(self, address: str) -> float:
        """Get the wallet's share of the current round, as a percentage."""
        return self._get(address, "roundShare", WireFloat)
    
    def get_total_paid(self, address: str) -> int:
        """Get the total amount paid to a wallet in gwei."""
        return self._get(address, "totalPaid", WireInt)
    
    def get_total_donated(self, address: str) -> int:
        """Get the total amount a wallet donated to the pool in gwei."""
        return self._get(address, "totalDonated", WireInt)
