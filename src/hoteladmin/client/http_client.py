"""
Shared API client for the hotel admin REST backend.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from hoteladmin.client.interceptors import default_pipeline
from hoteladmin.client.pipeline import Pipeline
from hoteladmin.config import get_config
from hoteladmin.session import TokenProvider, get_session

logger = logging.getLogger(__name__)


class ApiClient:
    """Async HTTP client that runs every call through an interception pipeline."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
        token_provider: Optional[TokenProvider] = None,
        pipeline: Optional[Pipeline] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Prefix for every request path (if None, taken from config)
            timeout_ms: Request timeout in milliseconds (if None, taken from config)
            headers: Default headers (if None, taken from config)
            token_provider: Source of the bearer token (if None, the shared session)
            pipeline: Interception pipeline (if None, the default one for token_provider)
            transport: Optional httpx transport, mainly for tests
        """
        config = get_config()
        self.base_url = base_url if base_url is not None else config.get_api_base_url()
        self.timeout_ms = timeout_ms if timeout_ms is not None else config.get_api_timeout_ms()
        default_headers = headers if headers is not None else config.get_default_headers()

        if pipeline is None:
            if token_provider is None:
                token_provider = get_session()
            pipeline = default_pipeline(token_provider)
        self.pipeline = pipeline

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=default_headers,
            timeout=httpx.Timeout(self.timeout_ms / 1000),
            transport=transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON payload.

        Raises:
            httpx.HTTPStatusError: the server answered with an error status
            httpx.TransportError: no response was received (timeout, connect error, ...)
        """
        request = self._http.build_request(method, path, json=json, params=params, headers=headers)
        prepared = self.pipeline.prepare(request)

        try:
            if isinstance(prepared, httpx.Response):
                response = prepared
            else:
                response = await self._http.send(prepared)
            return self.pipeline.resolve(response)
        except httpx.HTTPError as exc:
            self.pipeline.reject(exc)
            raise

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PUT", path, json=json, **kwargs)

    async def patch(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, json=json, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


# Global API client instance
_api_client: Optional[ApiClient] = None


def get_client() -> ApiClient:
    """Get or create the global API client instance."""
    global _api_client
    if _api_client is None:
        _api_client = ApiClient()
    return _api_client


def set_client(client: Optional[ApiClient]) -> None:
    """Set a custom API client instance (useful for testing)."""
    global _api_client
    _api_client = client
