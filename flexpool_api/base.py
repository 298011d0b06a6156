"""
Base API client functionality for the Flexpool API.

This module provides the request pipeline shared by all endpoint clients:
- URL construction for the miner, worker and pool endpoint families
- A single blocking GET per call, with a timeout
- Decoding of the ``{error, result}`` response envelope
- Checked projection of results into pydantic records
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Sequence, Type, TypeVar, Union

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import API_CONFIG
from .errors import APIError, MalformedResponse, TransportError, UnsupportedEndpoint
from .schemas import APIResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Endpoint(str, Enum):
    """Endpoint families of the API, valued by their path segment."""
    MINER = "miner"
    WORKER = "worker"
    POOL = "pool"


class BaseAPIClient:
    """Base class for Flexpool API clients with common functionality."""
    
    def __init__(
        self,
        base_url: str = API_CONFIG["base_url"],
        timeout: Optional[float] = API_CONFIG["timeout"],
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the base API client.
        
        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            session: Session to send requests with (a new one is created if omitted)
        
        Raises:
            ValueError: If the timeout is zero or negative
        """
        if timeout is not None and timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout!r}")
        
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.headers = {"Content-Type": API_CONFIG["content_type"]}
    
    def build_url(
        self,
        endpoint: Union[Endpoint, str],
        query: str,
        method: str,
        params: Sequence[str] = ()
    ) -> str:
        """
        Build the URL for an API call.
        
        The pool endpoints take no query segment. Worker endpoints delimit
        parameters with '/', every other endpoint with a repeated '?'.
        
        Args:
            endpoint: Endpoint family
            query: Wallet address (ignored for pool endpoints)
            method: Endpoint method name
            params: Pre-encoded ``key=value`` parameters, in order
        
        Returns:
            Full request URL
        
        Raises:
            UnsupportedEndpoint: If the endpoint is not a known family
        """
        try:
            endpoint = Endpoint(endpoint)
        except ValueError:
            raise UnsupportedEndpoint(f"Endpoint not supported: {endpoint!r}") from None
        
        url = f"{self.base_url}/{endpoint.value}"
        
        if endpoint is not Endpoint.POOL:
            url += f"/{query}"
        
        url += f"/{method}"
        
        for param in params:
            if endpoint is Endpoint.WORKER:
                url += f"/{param}"
            else:
                url += f"?{param}"
        
        return url
    
    def send_api_request(
        self,
        endpoint: Union[Endpoint, str],
        query: str,
        method: str,
        params: Sequence[str] = ()
    ) -> APIResponse:
        """
        Send a GET request to an endpoint and decode the response envelope.
        
        Args:
            endpoint: Endpoint family
            query: Wallet address (ignored for pool endpoints)
            method: Endpoint method name
            params: Pre-encoded ``key=value`` parameters
        
        Returns:
            The decoded response envelope
        
        Raises:
            UnsupportedEndpoint: If the endpoint is not a known family
            TransportError: If the request fails or returns a non-2xx status
            MalformedResponse: If the body is not a valid envelope
            APIError: If the envelope carries an error
        """
        url = self.build_url(endpoint, query, method, params)
        logger.debug(f"GET {url}")
        
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {str(e)}")
            raise TransportError(f"Request to {url} failed: {str(e)}") from e
        
        if not 200 <= response.status_code < 300:
            logger.error(f"HTTP {response.status_code} from {url}")
            raise TransportError(
                f"Request to {url} returned HTTP {response.status_code}",
                status_code=response.status_code
            )
        
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Undecodable response from {url}: {str(e)}")
            raise MalformedResponse(f"Response from {url} is not valid JSON") from e
        
        try:
            envelope = APIResponse.model_validate(body)
        except ValidationError as e:
            logger.error(f"Invalid response envelope from {url}: {str(e)}")
            raise MalformedResponse(f"Invalid response envelope from {url}: {str(e)}") from e
        
        if envelope.error is not None and envelope.error.is_set:
            logger.error(f"API error from {url}: {envelope.error.code} {envelope.error.message}")
            raise APIError(envelope.error.code, envelope.error.message)
        
        return envelope
    
    def _decode(self, result: Any, target: Any, method: str) -> Any:
        """
        Validate an envelope result against a record type.
        
        Args:
            result: The envelope's result value
            target: A pydantic model or any type a TypeAdapter accepts
            method: Endpoint method name, for error messages
        
        Returns:
            The validated record
        
        Raises:
            MalformedResponse: If the result does not match the target type
        """
        try:
            if isinstance(target, type) and issubclass(target, BaseModel):
                return target.model_validate(result)
            return TypeAdapter(target).validate_python(result)
        except ValidationError as e:
            logger.error(f"Error validating {method} data: {str(e)}")
            raise MalformedResponse(f"Invalid {method} data: {str(e)}") from e
    
    def _fetch(
        self,
        endpoint: Endpoint,
        query: str,
        method: str,
        target: Any,
        params: Sequence[str] = ()
    ) -> Any:
        """Send a request and decode its result into ``target``."""
        response = self.send_api_request(endpoint, query, method, params)
        return self._decode(response.result, target, method)
    
    def _fetch_list(
        self,
        endpoint: Endpoint,
        query: str,
        method: str,
        model: Type[ModelT],
        params: Sequence[str] = (),
        allow_null: bool = False
    ) -> List[ModelT]:
        """
        Send a request whose result is a list of records.
        
        With ``allow_null`` a null result is read as an empty collection,
        otherwise it is a decode failure.
        """
        response = self.send_api_request(endpoint, query, method, params)
        if allow_null and response.result is None:
            return []
        return self._decode(response.result, List[model], method)
    
    @staticmethod
    def _page_param(page: int) -> str:
        if isinstance(page, bool) or not isinstance(page, int) or page < 0:
            raise ValueError(f"Page must be a non-negative integer, got {page!r}")
        return f"page={page}"
    
    def close(self):
        """Close the session."""
        self.session.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
