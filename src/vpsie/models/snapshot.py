"""Snapshot models for VPSie SDK."""

from __future__ import annotations

from pydantic import Field

from vpsie.models.common import VpsieModel


class Snapshot(VpsieModel):
    """VM snapshot."""

    hostname: str | None = Field(None, description="Hostname of the source VM")
    name: str = Field("", description="Snapshot name")
    identifier: str = Field(..., description="Snapshot identifier")
    backup_key: str | None = Field(None, alias="backupKey")
    state: str | None = Field(None, description="Snapshot state")
    dc_identifier: str | None = Field(None, alias="dcIdentifier")
    daily: int = Field(0, description="Daily snapshot flag")
    is_snapshot: int = Field(0, description="Snapshot (1) or backup (0)")
    vm_identifier: str | None = Field(None, alias="vmIdentifier")
    backup_sha1: str | None = Field(None, alias="backupsha1")
    os_identifier: str | None = Field(None, description="OS image identifier")
    user_id: int = Field(0, description="Owner user ID")


class SnapshotList(VpsieModel):
    """Page of snapshots."""

    items: list[Snapshot] = Field(default_factory=list, description="Snapshot items")
    total: int = Field(0, description="Total count")
    offset: int = Field(0, description="Current offset")
    limit: int = Field(20, description="Page size")


class EnableAutoSnapshotRequest(VpsieModel):
    """Request body for scheduling automatic snapshots of a VM."""

    vm_identifier: str = Field(..., alias="vmIdentifier")
    vm_id: int = Field(0, alias="vmId")
    period: str = Field(..., description="Schedule period, e.g. daily")
    daily_snapshot: int = Field(0, alias="dailySnapshot")
    weekly_snapshot: int = Field(0, alias="weeklySnapshot")
    monthly_snapshot: int = Field(0, alias="monthlySnapshot")
    tags: list[str] = Field(default_factory=list)
