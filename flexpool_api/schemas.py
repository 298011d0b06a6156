"""
Data schemas for Flexpool API responses.

This module defines Pydantic models for the response envelope returned by
every endpoint and for the records each endpoint's result is decoded into.

The API encodes every number as a JSON number, so counters, hashrates and
gwei amounts may arrive as floats. ``WireInt`` fields narrow those values to
unsigned 64-bit integers. Values above 2**53 have already lost precision when
the JSON was parsed as a float; that loss cannot be recovered here.
"""

import math
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictStr, field_validator

UINT64_MAX = 2 ** 64 - 1


def _check_number(value: Any) -> Any:
    # bool is an int subclass; JSON true/false is never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value}")
    return value


def _to_uint64(value: Any) -> int:
    value = int(_check_number(value))
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"{value} is outside the unsigned 64-bit range")
    return value


def _to_float(value: Any) -> float:
    return float(_check_number(value))


WireInt = Annotated[int, BeforeValidator(_to_uint64)]
WireFloat = Annotated[float, BeforeValidator(_to_float)]


def _null_to_empty(value: Any) -> Any:
    return [] if value is None else value


class FlexpoolModel(BaseModel):
    """Base for all records: immutable, unknown keys ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ResponseError(FlexpoolModel):
    """Error descriptor of the response envelope."""
    code: int = 0
    message: str = ""
    
    @property
    def is_set(self) -> bool:
        return self.code != 0 or bool(self.message)


class APIResponse(FlexpoolModel):
    """
    Envelope wrapping every endpoint's response.
    
    ``result`` must be present but may be any JSON value, including null.
    """
    error: Optional[ResponseError] = None
    result: Any
    
    @field_validator("error", mode="before")
    @classmethod
    def wrap_error_message(cls, v):
        """Accept a bare error string as the descriptor's message."""
        if isinstance(v, str):
            return {"code": 0, "message": v}
        return v


class Block(FlexpoolModel):
    """A mined block, shared by the miner and pool block listings."""
    hash: StrictStr
    number: WireInt
    type: StrictStr
    miner: StrictStr
    difficulty: WireInt
    timestamp: WireInt
    confirmed: StrictBool
    round_time: WireInt
    luck: WireFloat
    server_name: StrictStr
    block_reward: WireInt
    block_fees: WireInt
    uncle_inclusion_rewards: WireInt
    total_rewards: WireInt


class CurrentStats(FlexpoolModel):
    """Current effective and reported hashrate of a miner or worker."""
    effective_hashrate: WireInt
    reported_hashrate: WireInt


class DailyStats(FlexpoolModel):
    """Hashrate and share totals over the last 24 hours."""
    effective_hashrate: WireFloat
    reported_hashrate: WireFloat
    valid_shares: WireInt
    stale_shares: WireInt
    invalid_shares: WireInt


class Stats(FlexpoolModel):
    current: CurrentStats
    daily: DailyStats


class MinerWorkerCount(FlexpoolModel):
    online: WireInt
    offline: WireInt


class MinerWorker(FlexpoolModel):
    """Worker entry from /miner/{address}/workers."""
    name: StrictStr
    online: StrictBool
    duplicate_workers_merged: WireInt
    reported_hashrate: WireInt
    effective_hashrate: WireInt
    valid_shares: WireInt
    stale_shares: WireInt
    invalid_shares: WireInt
    last_seen: WireInt


class ChartData(FlexpoolModel):
    """Chart point from the miner and worker chart endpoints."""
    timestamp: WireInt
    effective_hashrate: WireInt
    average_effective_hashrate: WireFloat
    reported_hashrate: WireInt
    valid_shares: WireInt
    stale_shares: WireInt
    invalid_shares: WireInt


class MinerPayment(FlexpoolModel):
    txid: StrictStr
    amount: WireInt
    timestamp: WireInt
    duration: WireInt


class MinerPaymentChart(FlexpoolModel):
    amount: WireInt
    timestamp: WireInt


class BlockCount(FlexpoolModel):
    confirmed: WireInt
    unconfirmed: WireInt


class MinerDetails(FlexpoolModel):
    """Account details from /miner/{address}/details."""
    min_payout_threshold: WireInt
    pool_donation: WireFloat
    max_fee_price: WireInt
    censored_email: StrictStr
    censored_ip: StrictStr
    first_joined: WireInt


class Page(FlexpoolModel):
    """
    Paging counters shared by paginated endpoints.
    
    The API returns a null ``data`` list when a page has no items; the
    counters are still present and required.
    """
    items_per_page: WireInt
    total_items: WireInt
    total_pages: WireInt


class PaymentPage(Page):
    data: Annotated[List[MinerPayment], BeforeValidator(_null_to_empty)] = Field(default_factory=list)


class BlockPage(Page):
    data: Annotated[List[Block], BeforeValidator(_null_to_empty)] = Field(default_factory=list)


class PoolHashrate(FlexpoolModel):
    """Pool hashrate per region in hashes per second."""
    as_: WireInt = Field(alias="as")
    au: WireInt
    eu: WireInt
    sa: WireInt
    us: WireInt
    total: WireInt
    
    @property
    def regions(self) -> dict:
        return {"as": self.as_, "au": self.au, "eu": self.eu, "sa": self.sa, "us": self.us}


class PoolHashrateChartData(PoolHashrate):
    timestamp: WireInt


class PoolMinerInfo(FlexpoolModel):
    """Entry from /pool/topMiners."""
    address: StrictStr
    hashrate: WireInt
    total_workers: WireInt
    balance: WireInt
    pool_donation: WireFloat
    first_joined: WireInt


class PoolDonatorInfo(FlexpoolModel):
    """Entry from /pool/topDonators."""
    address: StrictStr
    pool_donation: WireFloat
    total_donated: WireInt
    first_joined: WireInt


class PoolAvgLuckRoundTime(FlexpoolModel):
    luck: WireFloat
    round_time: WireFloat
