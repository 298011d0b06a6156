"""
Flexpool API Client

This package provides typed clients for the read-only Flexpool REST API,
covering miner, worker and pool statistics, plus unit conversion and pool
statistics helpers used by the command-line reports.
"""

from .base import BaseAPIClient, Endpoint
from .errors import (
    APIError,
    FlexpoolError,
    InsufficientData,
    MalformedResponse,
    TransportError,
    UnsupportedEndpoint
)
from .miner_client import MinerClient
from .pool_client import PoolClient
from .worker_client import WorkerClient

__all__ = [
    'BaseAPIClient',
    'Endpoint',
    'MinerClient',
    'WorkerClient',
    'PoolClient',
    'FlexpoolError',
    'UnsupportedEndpoint',
    'TransportError',
    'MalformedResponse',
    'APIError',
    'InsufficientData'
]

__version__ = "0.1.0"
