"""Authentication providers for VPSie SDK.

The VPSie API authenticates every request with a static access token.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_AUTH_HEADER = "Vpsie-Auth"


class AuthProvider(ABC):
    """Base authentication provider interface.

    All authentication methods must implement this interface.
    """

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Return authentication headers for requests.

        Returns:
            Dictionary of headers to include in requests.
        """
        ...

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if credentials are available.

        Returns:
            True if valid credentials are available.
        """
        ...


@dataclass
class APIKeyAuth(AuthProvider):
    """API token authentication.

    Example:
        ```python
        auth = APIKeyAuth(api_key="your-access-token")
        client = VpsieClient(auth=auth)
        ```

    Attributes:
        api_key: Access token issued by the VPSie control panel.
        header_name: Header carrying the token.
    """

    api_key: str = field(repr=False)  # Never log tokens
    header_name: str = DEFAULT_AUTH_HEADER

    def get_headers(self) -> dict[str, str]:
        """Return the token header.

        Returns:
            Dict with the configured auth header.
        """
        return {self.header_name: self.api_key}

    @property
    def is_authenticated(self) -> bool:
        """Check if the token is present.

        Returns:
            True if api_key is non-empty.
        """
        return bool(self.api_key)
