"""
API Client Framework
--------------------
Synchronous HTTP transport for the RocketReach REST API.

Rules:
- One request, one APIResponse (success or failure, never both)
- The API key travels in a header and is never logged
- No retries here; resilience belongs to the caller
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Dict, Optional

import httpx

from ..core.errors import APIError, NotAvailableError
from ..infra.config import DEFAULT_BASE_URL
from ..infra.logging import RequestContext, get_logger

USER_AGENT = "rocketreach-client/0.1"


class APIStatus(Enum):
    """Status of an API response."""
    SUCCESS = auto()
    RATE_LIMITED = auto()
    AUTH_ERROR = auto()
    NOT_FOUND = auto()
    SERVER_ERROR = auto()
    TIMEOUT = auto()
    NETWORK_ERROR = auto()
    DECODE_ERROR = auto()
    NOT_AVAILABLE = auto()  # Request succeeded, requested field absent


@dataclass(frozen=True)
class APIConfig:
    """Configuration for an API client."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    headers: Dict[str, str] = field(default_factory=dict)
    transport: Optional[httpx.BaseTransport] = None

    def __repr__(self) -> str:
        return f"APIConfig(base_url={self.base_url!r}, timeout_seconds={self.timeout_seconds})"


@dataclass
class APIResponse:
    """Response from an API call."""
    status: APIStatus
    data: Optional[Any] = None
    error: Optional[str] = None
    status_code: int = 0
    response_time_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == APIStatus.SUCCESS

    @classmethod
    def not_available(cls, message: str, source: "APIResponse") -> "APIResponse":
        """Build a shape-mismatch failure from a successful response."""
        return cls(
            status=APIStatus.NOT_AVAILABLE,
            error=message,
            status_code=source.status_code,
            response_time_ms=source.response_time_ms,
        )

    def with_data(self, data: Any) -> "APIResponse":
        """Copy of a successful response carrying an extracted value."""
        return APIResponse(
            status=self.status,
            data=data,
            status_code=self.status_code,
            response_time_ms=self.response_time_ms,
        )

    def unwrap(self) -> Any:
        """
        Return data on success, raise otherwise.

        NOT_AVAILABLE raises NotAvailableError; every transport failure
        raises APIError carrying this response.
        """
        if self.success:
            return self.data
        if self.status == APIStatus.NOT_AVAILABLE:
            raise NotAvailableError(self.error or "Information not available")
        raise APIError(self.error or self.status.name, response=self)


class APIClient:
    """
    Base API client with error handling.

    Each request opens its own httpx.Client, so the APIClient holds no
    connections and needs no teardown.
    """

    def __init__(self, config: APIConfig):
        self.config = config
        self._logger = get_logger("api.client")

    def _get_headers(self) -> Dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        headers.update(self.config.headers)
        headers["Api-Key"] = self.config.api_key
        return headers

    def get(self, endpoint: str, params: Optional[Any] = None) -> APIResponse:
        """Make a GET request."""
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Optional[Any] = None) -> APIResponse:
        """Make a POST request."""
        return self._request("POST", endpoint, json=data)

    def _url(self, endpoint: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Any] = None,
        json: Optional[Any] = None
    ) -> APIResponse:
        """Make an HTTP request with error handling."""
        url = self._url(endpoint)
        start_time = datetime.now()

        with RequestContext():
            try:
                with httpx.Client(
                    timeout=self.config.timeout_seconds,
                    transport=self.config.transport,
                ) as client:
                    response = client.request(
                        method=method,
                        url=url,
                        params=params,
                        json=json,
                        headers=self._get_headers()
                    )
            except httpx.TimeoutException:
                self._logger.warning(f"{method} {endpoint} timed out")
                return APIResponse(
                    status=APIStatus.TIMEOUT,
                    error="Request timed out"
                )
            except httpx.TransportError as e:
                self._logger.warning(f"{method} {endpoint} network error: {e}")
                return APIResponse(
                    status=APIStatus.NETWORK_ERROR,
                    error=f"Network error: {e}"
                )
            except Exception as e:
                self._logger.error(f"Request failed: {e}")
                return APIResponse(
                    status=APIStatus.NETWORK_ERROR,
                    error=str(e)
                )

            response_time = (datetime.now() - start_time).total_seconds() * 1000
            self._logger.debug(
                f"{method} {endpoint} -> {response.status_code} ({response_time:.0f} ms)"
            )
            return self._to_api_response(response, response_time)

    def _to_api_response(self, response: httpx.Response, response_time: float) -> APIResponse:
        """Map an httpx response onto an APIResponse."""
        status_code = response.status_code

        if response.is_success:
            try:
                data = response.json() if response.content else None
            except ValueError as e:
                self._logger.warning(f"Undecodable body from {response.request.url.path}: {e}")
                return APIResponse(
                    status=APIStatus.DECODE_ERROR,
                    error=f"Invalid JSON in response: {e}",
                    status_code=status_code,
                    response_time_ms=response_time
                )
            return APIResponse(
                status=APIStatus.SUCCESS,
                data=data,
                status_code=status_code,
                response_time_ms=response_time
            )

        if status_code == 429:
            status, error = APIStatus.RATE_LIMITED, "Rate limit exceeded"
        elif status_code in (401, 403):
            status, error = APIStatus.AUTH_ERROR, "Authentication failed"
        elif status_code == 404:
            status, error = APIStatus.NOT_FOUND, "Resource not found"
        elif status_code >= 500:
            status, error = APIStatus.SERVER_ERROR, f"Server error: {status_code}"
        else:
            status, error = APIStatus.SERVER_ERROR, f"Unexpected status: {status_code}"

        self._logger.warning(f"{response.request.method} {response.request.url.path}: {error}")
        return APIResponse(
            status=status,
            data=_error_body(response),
            error=error,
            status_code=status_code,
            response_time_ms=response_time
        )


def _error_body(response: httpx.Response) -> Optional[Any]:
    # Error bodies are informational only; a non-JSON body is dropped
    try:
        return response.json() if response.content else None
    except ValueError:
        return None
