"""
Flexpool Pool API Client

This module provides a client for the /pool endpoints of the Flexpool API:
pool hashrate, online counts, mined blocks, luck and top miner listings.
"""

import logging
import time
from typing import Callable, List

from .base import BaseAPIClient, Endpoint
from .config import REPORT_CONFIG
from .schemas import (
    Block,
    BlockCount,
    BlockPage,
    PoolAvgLuckRoundTime,
    PoolDonatorInfo,
    PoolHashrate,
    PoolHashrateChartData,
    PoolMinerInfo,
    WireFloat,
    WireInt
)

logger = logging.getLogger(__name__)


class PoolClient(BaseAPIClient):
    """
    Client for the pool endpoints of the Flexpool API.
    
    Pool URLs carry no wallet address: /pool/{method}[?param].
    """
    
    def _get(self, method: str, target, params=()):
        return self._fetch(Endpoint.POOL, "", method, target, params)
    
    def get_hashrate(self) -> PoolHashrate:
        """
        Get the pool hashrate of each region and in total.
        
        Returns:
            PoolHashrate in hashes per second
        
        Raises:
            FlexpoolError: If the request or decoding fails
        """
        return self._get("hashrate", PoolHashrate)
    
    def get_hashrate_chart(self) -> List[PoolHashrateChartData]:
        """Get the pool hashrate chart."""
        return self._fetch_list(Endpoint.POOL, "", "hashrateChart", PoolHashrateChartData)
    
    def get_miners_online(self) -> int:
        """Get the number of miners currently active on the pool."""
        return self._get("minersOnline", WireInt)
    
    def get_workers_online(self) -> int:
        """Get the number of workers currently active on the pool."""
        return self._get("workersOnline", WireInt)
    
    def get_blocks(self, page: int = 0) -> BlockPage:
        """
        Get a page of blocks mined by the pool.
        
        Args:
            page: Zero-based page number
        
        Returns:
            BlockPage whose data is empty past the last page
        
        Raises:
            ValueError: If the page number is invalid
            FlexpoolError: If the request or decoding fails
        """
        return self._get("blocks", BlockPage, [self._page_param(page)])
    
    def get_block_count(self) -> BlockCount:
        """Get the confirmed and unconfirmed block counts of the pool."""
        return self._get("blockCount", BlockCount)
    
    def get_top_miners(self) -> List[PoolMinerInfo]:
        """Get the miners with the highest hashrate."""
        return self._fetch_list(Endpoint.POOL, "", "topMiners", PoolMinerInfo)
    
    def get_top_donators(self) -> List[PoolDonatorInfo]:
        """Get the miners who donated the most to the pool."""
        return self._fetch_list(Endpoint.POOL, "", "topDonators", PoolDonatorInfo)
    
    def get_avg_luck_roundtime(self) -> PoolAvgLuckRoundTime:
        """Get the pool's average luck (percent) and round time (seconds)."""
        return self._get("avgLuckRoundtime", PoolAvgLuckRoundTime)
    
    def get_current_luck(self) -> float:
        """Get the pool's luck in the current round, as a percentage."""
        return self._get("currentLuck", WireFloat)
    
    def get_average_block_reward(self) -> int:
        """Get the pool's average block reward in gwei."""
        return self._get("averageBlockReward", WireInt)
    
    def get_recent_blocks(
        self,
        pages: int = REPORT_CONFIG["block_pages"],
        throttle_seconds: float = REPORT_CONFIG["page_delay_seconds"],
        sleep: Callable[[float], None] = time.sleep
    ) -> List[Block]:
        """
        Gather the blocks of the first ``pages`` pages, newest first.
        
        Pages are requested one at a time with a pause between requests to
        lighten the load on the API. Gathering stops early once a page
        comes back empty.
        
        Args:
            pages: Number of pages to request
            throttle_seconds: Pause between page requests, 0 to disable
            sleep: Function used to pause
        
        Returns:
            List of blocks from all requested pages
        
        Raises:
            ValueError: If pages or throttle_seconds is negative
            FlexpoolError: If any page request fails
        """
        if pages < 0:
            raise ValueError(f"Pages must be non-negative, got {pages}")
        if throttle_seconds < 0:
            raise ValueError(f"Throttle must be non-negative, got {throttle_seconds}")
        
        blocks = []
        for page in range(pages):
            if page > 0 and throttle_seconds:
                sleep(throttle_seconds)
            
            block_page = self.get_blocks(page)
            blocks.extend(block_page.data)
            logger.debug(f"Fetched {len(block_page.data)} blocks from page {page}")
            
            if not block_page.data:
                break
        
        return blocks
