"""Base Jupiter API client.

This module provides the HTTP plumbing shared by the quote, swap and token
registry clients: lifecycle of the underlying ``httpx.AsyncClient`` and the
conversion of every exchange into a tagged ``ApiResult``.
"""

from typing import Any, Dict, Optional

import httpx

from jupiter_swap.config import JupiterConfig, get_default_config
from jupiter_swap.logging_config import get_logger, log_with_context
from jupiter_swap.models.api_models import ApiFailure, ApiResult, ApiSuccess

# Get logger
logger = get_logger(__name__)


class BaseJupiterClient:
    """Base client for talking to the Jupiter aggregator."""

    def __init__(
        self,
        config: Optional[JupiterConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the client.

        Args:
            config: Aggregator configuration. Defaults to the public endpoint with no signer.
            http_client: Optional shared HTTP client. A client passed in here is
                never closed by this instance.
        """
        self.config = config or get_default_config()
        self.headers = {"Content-Type": "application/json"}

        self._http_client = http_client
        self._owns_http_client = False

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get the HTTP client, creating one on first use."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_http_client = True
        return self._http_client

    def _url(self, path: str) -> str:
        return f"{self.config.endpoint}{path}"

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None
    ) -> ApiResult:
        """Make a single HTTP request.

        There are no retries: one call is one round-trip.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters
            json_body: JSON request body

        Returns:
            ApiSuccess for 2xx responses, ApiFailure otherwise

        Raises:
            httpx.TransportError: If the request could not be completed
        """
        log_with_context(logger, "debug", "Jupiter request", method=method, url=url, params=params)

        client = self._get_http_client()
        if json_body is None:
            response = await client.request(method, url, params=params)
        else:
            response = await client.request(method, url, params=params, json=json_body, headers=self.headers)

        if response.is_success:
            return ApiSuccess(status_code=response.status_code, text=response.text)

        log_with_context(
            logger,
            "warning",
            "Jupiter request rejected",
            method=method,
            url=url,
            status_code=response.status_code
        )
        return ApiFailure(status_code=response.status_code, text=response.text)

    async def _get(self, url: str, params: Optional[Dict[str, str]] = None) -> ApiResult:
        return await self._request("GET", url, params=params)

    async def _post(self, url: str, json_body: Dict[str, Any]) -> ApiResult:
        return await self._request("POST", url, json_body=json_body)

    async def __aenter__(self):
        """Async context manager entry.

        Returns:
            Self
        """
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

