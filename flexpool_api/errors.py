"""
Exceptions raised by the Flexpool API client.

Every failure is raised to the caller; no partial or placeholder
record is ever returned in place of a failed call.
"""

from typing import Optional


class FlexpoolError(Exception):
    """Base class for all client errors."""
    pass


class UnsupportedEndpoint(FlexpoolError, ValueError):
    """Raised when a request targets an endpoint category the API does not have."""
    pass


class TransportError(FlexpoolError):
    """Raised for connection failures, timeouts and non-2xx HTTP responses."""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(FlexpoolError, ValueError):
    """Raised when a response body does not have the expected shape."""
    pass


class APIError(FlexpoolError):
    """Raised when the response envelope carries a populated error descriptor."""
    
    def __init__(self, code: int, message: str):
        super().__init__(f"API error {code}: {message}")
        self.code = code
        self.message = message


class InsufficientData(FlexpoolError, ValueError):
    """Raised when a statistic cannot be derived from the given input."""
    pass
