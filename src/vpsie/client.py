"""VPSie SDK Client.

Main entry point for interacting with the VPSie API.
"""

from __future__ import annotations

import logging
from typing import Any

from vpsie._config import VpsieConfig
from vpsie._http import AsyncHttpClient, HttpClient
from vpsie.auth import APIKeyAuth, AuthProvider
from vpsie.exceptions import AuthenticationError
from vpsie.resources.k8s import AsyncK8s, K8s
from vpsie.resources.snapshots import AsyncSnapshots, Snapshots

logger = logging.getLogger(__name__)


def _resolve_auth(
    api_key: str | None,
    auth: AuthProvider | None,
    config: VpsieConfig,
) -> AuthProvider:
    """Resolve the auth provider.

    Priority order:
    1. Explicit auth provider
    2. Explicit api_key
    3. VPSIE_API_KEY env var, then the config file (already merged by VpsieConfig.load)

    Raises:
        AuthenticationError: If no credentials are available.
    """
    if auth is not None:
        return auth
    if api_key:
        return APIKeyAuth(api_key=api_key)
    if config.api_key:
        return APIKeyAuth(api_key=config.api_key)

    raise AuthenticationError(
        "API key is required. Set VPSIE_API_KEY environment variable, "
        "pass api_key argument, or configure it in ~/.vpsie/config.toml"
    )


class VpsieClient:
    """Synchronous client for the VPSie API.

    Example:
        ```python
        from vpsie import VpsieClient

        with VpsieClient(api_key="your-token") as client:
            for cluster in client.k8s.list():
                print(cluster.identifier, cluster.cluster_name)

            page = client.snapshots.list(limit=50)
            print(f"{page.total} snapshots")
        ```

    Environment variables:
        VPSIE_API_KEY: API access token
        VPSIE_BASE_URL: Base URL (default: https://api.vpsie.com/apps/v2)
        VPSIE_TIMEOUT: Request timeout in seconds (default: 60)
        VPSIE_MAX_RETRIES: Max retries (default: 3)
        VPSIE_VERIFY_SSL: Whether to verify TLS certificates (default: true)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        auth: AuthProvider | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        verify_ssl: bool | None = None,
    ) -> None:
        """Initialize the VPSie client.

        Args:
            api_key: API access token. Falls back to VPSIE_API_KEY or the config file.
            auth: Explicit AuthProvider instance to use.
            base_url: API base URL. Falls back to VPSIE_BASE_URL or the config file.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of retries for failed requests.
            verify_ssl: Whether to verify SSL certificates.
        """
        config = VpsieConfig.load()

        self._base_url = base_url or config.base_url
        self._timeout = timeout if timeout is not None else config.timeout
        self._max_retries = max_retries if max_retries is not None else config.max_retries
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl
        self._auth = _resolve_auth(api_key, auth, config)

        self._http = HttpClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            max_retries=self._max_retries,
            verify_ssl=self._verify_ssl,
        )
        logger.debug("Initialized VpsieClient for %s", self._base_url)

        self.k8s = K8s(self._http)
        self.snapshots = Snapshots(self._http)

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def __enter__(self) -> VpsieClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"VpsieClient(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str | None:
        if isinstance(self._auth, APIKeyAuth):
            return self._auth.api_key
        return None


class AsyncVpsieClient:
    """Asynchronous client for the VPSie API.

    Example:
        ```python
        import asyncio
        from vpsie import AsyncVpsieClient

        async def main():
            async with AsyncVpsieClient(api_key="your-token") as client:
                cluster = await client.k8s.get("cluster-uuid")
                print(len(cluster.nodes))

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        auth: AuthProvider | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        verify_ssl: bool | None = None,
    ) -> None:
        """Initialize the async VPSie client.

        Args:
            api_key: API access token. Falls back to VPSIE_API_KEY or the config file.
            auth: Explicit AuthProvider instance to use.
            base_url: API base URL. Falls back to VPSIE_BASE_URL or the config file.
            timeout: Request timeout in seconds.
            max_retries: Maximum number of retries for failed requests.
            verify_ssl: Whether to verify SSL certificates.
        """
        config = VpsieConfig.load()

        self._base_url = base_url or config.base_url
        self._timeout = timeout if timeout is not None else config.timeout
        self._max_retries = max_retries if max_retries is not None else config.max_retries
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl
        self._auth = _resolve_auth(api_key, auth, config)

        self._http = AsyncHttpClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            max_retries=self._max_retries,
            verify_ssl=self._verify_ssl,
        )

        self.k8s = AsyncK8s(self._http)
        self.snapshots = AsyncSnapshots(self._http)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> AsyncVpsieClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncVpsieClient(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str | None:
        if isinstance(self._auth, APIKeyAuth):
            return self._auth.api_key
        return None
