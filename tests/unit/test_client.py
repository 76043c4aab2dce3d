"""Tests for VpsieClient."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from vpsie.auth import APIKeyAuth
from vpsie.client import AsyncVpsieClient, VpsieClient
from vpsie.exceptions import AuthenticationError
from vpsie.resources.k8s import K8s
from vpsie.resources.snapshots import Snapshots


def test_client_requires_auth(tmp_path: Path) -> None:
    """Test that client raises error without any authentication."""
    with (
        patch("vpsie._config.CONFIG_FILE", tmp_path / "missing.toml"),
        patch.dict(os.environ, {}, clear=True),
    ):
        with pytest.raises(AuthenticationError) as exc_info:
            VpsieClient(base_url="https://api.example.com")

        assert "API key is required" in str(exc_info.value)


def test_client_with_api_key(api_key: str, base_url: str) -> None:
    """Test client initialization with API key."""
    client = VpsieClient(api_key=api_key, base_url=base_url)

    assert isinstance(client._auth, APIKeyAuth)
    assert client._auth.api_key == api_key
    assert client.base_url == base_url
    assert isinstance(client.k8s, K8s)
    assert isinstance(client.snapshots, Snapshots)
    assert client.k8s._http is client.snapshots._http

    client.close()


def test_client_with_auth_provider(base_url: str) -> None:
    """An explicit auth provider wins over api_key."""
    auth = APIKeyAuth(api_key="provider-key", header_name="Authorization")
    with VpsieClient(api_key="ignored", auth=auth, base_url=base_url) as client:
        assert client._auth is auth
        assert client.api_key == "provider-key"


def test_client_context_manager(api_key: str, base_url: str) -> None:
    """Test client as context manager."""
    with VpsieClient(api_key=api_key, base_url=base_url) as client:
        assert client.api_key == api_key

    assert client._http._client.is_closed


def test_client_repr_hides_key(api_key: str, base_url: str) -> None:
    """Test client string representation."""
    with VpsieClient(api_key=api_key, base_url=base_url) as client:
        assert base_url in repr(client)
        assert api_key not in repr(client)
        assert api_key not in repr(client._auth)


def test_client_overrides(api_key: str, base_url: str) -> None:
    """Explicit transport settings are passed to the HTTP client."""
    with VpsieClient(
        api_key=api_key, base_url=base_url, timeout=5.0, max_retries=1, verify_ssl=False
    ) as client:
        assert client._http._timeout == 5.0
        assert client._http._max_retries == 1


def test_async_client_properties(api_key: str, base_url: str) -> None:
    """AsyncVpsieClient exposes the same properties."""
    client = AsyncVpsieClient(api_key=api_key, base_url=base_url)
    assert client.base_url == base_url
    assert client.api_key == api_key
    assert base_url in repr(client)


def test_async_client_requires_auth(tmp_path: Path) -> None:
    """AsyncVpsieClient also refuses to start without credentials."""
    with (
        patch("vpsie._config.CONFIG_FILE", tmp_path / "missing.toml"),
        patch.dict(os.environ, {}, clear=True),
    ):
        with pytest.raises(AuthenticationError):
            AsyncVpsieClient()
