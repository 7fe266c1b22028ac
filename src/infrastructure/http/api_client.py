"""
Async client for the storefront API

All outgoing service calls go through one httpx.AsyncClient with a bounded
timeout. Transport failures become ServiceUnavailableError, non-success
statuses become ApiResponseError carrying the server's error text.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from src.infrastructure.logging.logging_config import PerformanceLogger
from src.infrastructure.utilities.exceptions import ApiResponseError, ServiceUnavailableError


class StorefrontApiClient:
    """Thin JSON client over httpx.AsyncClient"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._logger = logging.getLogger(self.__class__.__name__)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def get(self, path: str, service: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, service, params=params)

    async def post(self, path: str, service: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, service, payload=payload)

    async def request(
        self,
        method: str,
        path: str,
        service: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body"""
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            with PerformanceLogger(f"{method} {path}", self._logger, {"service": service}):
                response = await self._get_client().request(method, path, params=params, json=payload)
        except httpx.TimeoutException as e:
            self._logger.warning("⏱️ %s TIMED OUT after %ss: %s %s", service, self.timeout, method, path)
            raise ServiceUnavailableError(service, f"timeout after {self.timeout}s") from e
        except httpx.RequestError as e:
            self._logger.warning("🔌 %s UNREACHABLE: %s %s: %s", service, method, path, e)
            raise ServiceUnavailableError(service, str(e)) from e

        if response.is_error:
            detail = self._error_detail(response)
            self._logger.warning("❌ %s returned %d for %s %s: %s", service, response.status_code, method, path, detail)
            raise ApiResponseError(service, response.status_code, detail)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError(service, response.status_code, "invalid JSON body") from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return response.text or None
        if isinstance(body, dict):
            return body.get("error") or body.get("message")
        return None

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "StorefrontApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
