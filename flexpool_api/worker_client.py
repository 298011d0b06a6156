"""
Flexpool Worker API Client

This module provides a client for the /worker/{address}/{worker} endpoints,
which report the statistics of a single worker of a mining wallet.
"""

import logging
from typing import List

from .base import BaseAPIClient, Endpoint
from .schemas import ChartData, CurrentStats, DailyStats, Stats

logger = logging.getLogger(__name__)


class WorkerClient(BaseAPIClient):
    """
    Client for the worker endpoints of the Flexpool API.
    
    Worker URLs have the form /worker/{address}/{worker}/{stat}: the worker
    name takes the place of the method and the statistic is sent as a
    '/'-delimited parameter.
    """
    
    def _get(self, address: str, worker: str, stat: str, target):
        if not address:
            raise ValueError("Miner address is required")
        if not worker:
            raise ValueError("Worker name is required")
        return self._fetch(Endpoint.WORKER, address, worker, target, [stat])
    
    def get_current(self, address: str, worker: str) -> CurrentStats:
        """
        Get the current effective and reported hashrate of a worker.
        
        Args:
            address: Mining wallet address
            worker: Worker name
        
        Returns:
            CurrentStats in hashes per second
        
        Raises:
            ValueError: If the address or worker name is empty
            FlexpoolError: If the request or decoding fails
        """
        return self._get(address, worker, "current", CurrentStats)
    
    def get_daily(self, address: str, worker: str) -> DailyStats:
        """Get hashrate and share totals of a worker over the last 24 hours."""
        return self._get(address, worker, "daily", DailyStats)
    
    def get_stats(self, address: str, worker: str) -> Stats:
        """Get the current and daily stats of a worker."""
        return self._get(address, worker, "stats", Stats)
    
    def get_chart(self, address: str, worker: str) -> List[ChartData]:
        """Get the hashrate and share chart of a worker."""
        return self._get(address, worker, "chart", List[ChartData])
