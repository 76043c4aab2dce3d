"""Base resource class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import pydantic

from vpsie.exceptions import APIError
from vpsie.models.common import Envelope, VpsieModel

if TYPE_CHECKING:
    from vpsie._http import AsyncHttpClient, HttpClient

M = TypeVar("M", bound=VpsieModel)


class SyncResource:
    """Base class for synchronous API resources."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http


class AsyncResource:
    """Base class for asynchronous API resources."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http


def require_identifier(value: str, name: str = "identifier") -> str:
    """Reject empty identifiers before any request is sent.

    Returns:
        The identifier, stripped of surrounding whitespace.

    Raises:
        ValueError: If the identifier is empty or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return value.strip()


def path_segment(value: str, name: str = "identifier") -> str:
    """Validate an identifier and percent-encode it as one path segment."""
    return quote(require_identifier(value, name), safe="")


def unwrap(model: type[M], payload: Any) -> M:
    """Decode a single-entity envelope and return its ``data``.

    Raises:
        APIError: If the response does not have the expected shape.
    """
    try:
        return Envelope[model].model_validate(payload).data  # type: ignore[valid-type]
    except pydantic.ValidationError as e:
        raise APIError(f"Unexpected response shape for {model.__name__}: {e}") from e


def unwrap_list(model: type[M], payload: Any) -> Envelope[list[M]]:
    """Decode a list envelope. A null or missing ``data`` becomes an empty list."""
    if isinstance(payload, dict) and payload.get("data") is None:
        payload = {**payload, "data": []}
    try:
        return Envelope[list[model]].model_validate(payload)  # type: ignore[valid-type]
    except pydantic.ValidationError as e:
        raise APIError(f"Unexpected response shape for {model.__name__} list: {e}") from e
