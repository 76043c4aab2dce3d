"""Common models shared across resources."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class VpsieModel(BaseModel):
    """Base model for all VPSie models.

    Attributes are snake_case; the camelCase wire names are declared as
    aliases and accepted on input alongside the attribute names.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        """Treat a JSON null like a missing key for fields that have a default."""
        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if not field.is_required():
                defaulted.add(name)
                if field.alias:
                    defaulted.add(field.alias)
        return {k: v for k, v in data.items() if v is not None or k not in defaulted}

    def to_payload(self) -> dict:
        """Serialize to a JSON request body using wire names."""
        return self.model_dump(mode="json", by_alias=True)


class Envelope(VpsieModel, Generic[T]):
    """Response wrapper shared by every endpoint: ``{"error": bool, "data": T}``."""

    error: bool = False
    data: T
    total: int | None = None


class DeleteStatistic(VpsieModel):
    """Reason and note the API records when a resource is deleted."""

    reason: str = ""
    note: str = ""
