"""HTTP client infrastructure for VPSie SDK.

Handles:
- Authentication via AuthProvider
- Retries with exponential backoff (reads only, unless the request never
  reached the server)
- Rate limit handling
- Response envelope and error mapping
"""

from __future__ import annotations

import contextlib
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from vpsie._version import __version__
from vpsie.exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    ValidationError,
    VpsieError,
)

if TYPE_CHECKING:
    from vpsie.auth import AuthProvider

logger = logging.getLogger(__name__)

# Methods safe to re-send after the server may have received them
IDEMPOTENT_METHODS = frozenset({"GET"})

DEFAULT_HEADERS = {
    "User-Agent": f"vpsie-sdk-python/{__version__}",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class HttpClient:
    """Synchronous HTTP client for the VPSie API."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        verify_ssl: bool = True,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._max_retries = max_retries

        self._client = httpx.Client(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Perform GET request."""
        return self._request("GET", path, params=params)

    def post(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform POST request."""
        return self._request("POST", path, json=json)

    def delete(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform DELETE request.

        The VPSie API reads a JSON body on several DELETE endpoints, so one
        may be passed here.
        """
        return self._request("DELETE", path, json=json)

    def _get_auth_headers(self) -> dict[str, str]:
        """Get authentication headers from auth provider."""
        if self._auth is None:
            return {}
        return self._auth.get_headers()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform HTTP request with retries and error handling."""
        last_exception: Exception | None = None
        retry_count = 0

        while retry_count <= self._max_retries:
            try:
                response = self._client.request(
                    method,
                    path,
                    params=_filter_none(params) if params else None,
                    json=json,
                    headers=self._get_auth_headers(),
                )
                logger.debug("%s %s -> %s", method, path, response.status_code)
                return _handle_response(response)

            except httpx.ConnectTimeout as e:
                last_exception = TimeoutError(f"Request timed out: {e}")
                retry_count += 1

            except httpx.TimeoutException as e:
                last_exception = TimeoutError(f"Request timed out: {e}")
                if method not in IDEMPOTENT_METHODS:
                    raise last_exception from e
                retry_count += 1

            except httpx.ConnectError as e:
                last_exception = ConnectionError(f"Failed to connect: {e}")
                retry_count += 1

            except RateLimitError as e:
                # Use retry_after if available, otherwise exponential backoff
                wait_time = e.retry_after or (2**retry_count)
                retry_count += 1
                last_exception = e
                if retry_count <= self._max_retries:
                    logger.warning("Rate limited on %s %s, waiting %ss", method, path, wait_time)
                    time.sleep(wait_time)
                continue

            except ServerError as e:
                if method not in IDEMPOTENT_METHODS:
                    raise
                last_exception = e
                retry_count += 1

            if retry_count <= self._max_retries:
                logger.warning(
                    "Retrying %s %s (attempt %d/%d): %s",
                    method,
                    path,
                    retry_count,
                    self._max_retries,
                    last_exception,
                )
                # Exponential backoff
                time.sleep(2**retry_count * 0.1)

        if last_exception:
            raise last_exception
        raise VpsieError("Request failed after retries")


class AsyncHttpClient:
    """Asynchronous HTTP client for the VPSie API."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        verify_ssl: bool = True,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Perform GET request."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform POST request."""
        return await self._request("POST", path, json=json)

    async def delete(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform DELETE request."""
        return await self._request("DELETE", path, json=json)

    def _get_auth_headers(self) -> dict[str, str]:
        if self._auth is None:
            return {}
        return self._auth.get_headers()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform HTTP request with retries and error handling."""
        import anyio

        last_exception: Exception | None = None
        retry_count = 0

        while retry_count <= self._max_retries:
            try:
                response = await self._client.request(
                    method,
                    path,
                    params=_filter_none(params) if params else None,
                    json=json,
                    headers=self._get_auth_headers(),
                )
                logger.debug("%s %s -> %s", method, path, response.status_code)
                return _handle_response(response)

            except httpx.ConnectTimeout as e:
                last_exception = TimeoutError(f"Request timed out: {e}")
                retry_count += 1

            except httpx.TimeoutException as e:
                last_exception = TimeoutError(f"Request timed out: {e}")
                if method not in IDEMPOTENT_METHODS:
                    raise last_exception from e
                retry_count += 1

            except httpx.ConnectError as e:
                last_exception = ConnectionError(f"Failed to connect: {e}")
                retry_count += 1

            except RateLimitError as e:
                wait_time = e.retry_after or (2**retry_count)
                retry_count += 1
                last_exception = e
                if retry_count <= self._max_retries:
                    logger.warning("Rate limited on %s %s, waiting %ss", method, path, wait_time)
                    await anyio.sleep(wait_time)
                continue

            except ServerError as e:
                if method not in IDEMPOTENT_METHODS:
                    raise
                last_exception = e
                retry_count += 1

            if retry_count <= self._max_retries:
                logger.warning(
                    "Retrying %s %s (attempt %d/%d): %s",
                    method,
                    path,
                    retry_count,
                    self._max_retries,
                    last_exception,
                )
                await anyio.sleep(2**retry_count * 0.1)

        if last_exception:
            raise last_exception
        raise VpsieError("Request failed after retries")


def _handle_response(response: httpx.Response) -> Any:
    """Decode a response body and map errors to exceptions."""
    if response.status_code == 204:
        return None

    try:
        data = response.json()
    except Exception:
        data = None

    if response.is_success:
        # The API reports some failures inside a 2xx envelope
        if isinstance(data, dict) and data.get("error") is True:
            raise APIError(_extract_error_message(data, response), response=response)
        return data

    message = _extract_error_message(data, response)

    if response.status_code in (401, 403):
        raise AuthenticationError(message, response=response)

    if response.status_code == 404:
        raise NotFoundError(message, response=response)

    if response.status_code in (400, 422):
        errors = data.get("errors", []) if isinstance(data, dict) else []
        raise ValidationError(message, errors=errors, response=response)

    if response.status_code == 429:
        retry_after = response.headers.get("Retry-After")
        retry_after_int: int | None = None
        if retry_after:
            with contextlib.suppress(ValueError):
                retry_after_int = int(retry_after)
        raise RateLimitError(
            message,
            retry_after=retry_after_int,
            response=response,
        )

    if response.status_code >= 500:
        raise ServerError(f"Server error: {message}", response=response)

    raise VpsieError(message, response=response)


def _extract_error_message(data: Any, response: httpx.Response) -> str:
    """Extract error message from response."""
    if isinstance(data, dict):
        if data.get("message"):
            return str(data["message"])
        error = data.get("error")
        if isinstance(error, str):
            return error
        if isinstance(error, dict) and "message" in error:
            return error["message"]
        if "detail" in data:
            return str(data["detail"])
        if isinstance(data.get("data"), str) and data["data"]:
            return data["data"]

    return f"HTTP {response.status_code}: {response.reason_phrase}"


def _filter_none(params: dict[str, Any]) -> dict[str, Any]:
    """Remove None values from params dict."""
    return {k: v for k, v in params.items() if v is not None}
