"""Snapshots resource for VPSie SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vpsie.models.common import DeleteStatistic
from vpsie.models.snapshot import EnableAutoSnapshotRequest, Snapshot, SnapshotList
from vpsie.resources._base import (
    AsyncResource,
    SyncResource,
    path_segment,
    require_identifier,
    unwrap_list,
)

if TYPE_CHECKING:
    from vpsie._http import AsyncHttpClient, HttpClient

SNAPSHOT_PATH = "/snapshot"
VM_SNAPSHOT_PATH = "/vm/snapshot"

DEFAULT_LIMIT = 20


def _page_params(offset: int, limit: int) -> dict[str, Any]:
    if offset < 0:
        raise ValueError("offset must be >= 0")
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return {"offset": offset, "limit": limit}


def _to_list(data: Any, offset: int, limit: int) -> SnapshotList:
    envelope = unwrap_list(Snapshot, data)
    total = envelope.total if envelope.total is not None else len(envelope.data)
    return SnapshotList(items=envelope.data, total=total, offset=offset, limit=limit)


def _create_payload(name: str, vm_identifier: str) -> dict[str, Any]:
    require_identifier(name, "name")
    return {
        "name": name,
        "vmIdentifier": require_identifier(vm_identifier, "vm_identifier"),
    }


def _rollback_payload(snapshot_identifier: str) -> dict[str, Any]:
    return {
        "snapshotIdentifier": require_identifier(snapshot_identifier, "snapshot_identifier"),
    }


def _enable_auto_payload(
    request: EnableAutoSnapshotRequest | None, fields: dict[str, Any]
) -> dict[str, Any]:
    if request is None:
        request = EnableAutoSnapshotRequest(**fields)
    elif fields:
        raise TypeError("Pass either an EnableAutoSnapshotRequest or keyword fields, not both")
    require_identifier(request.vm_identifier, "vm_identifier")
    return request.to_payload()


def _delete_payload(snapshot_identifier: str, reason: str, note: str) -> dict[str, Any]:
    return {
        "snapshotIdentifier": require_identifier(snapshot_identifier, "snapshot_identifier"),
        "deleteStatistic": DeleteStatistic(reason=reason, note=note).to_payload(),
    }


class Snapshots(SyncResource):
    """VM snapshots.

    Example:
        ```python
        from vpsie import VpsieClient

        client = VpsieClient(api_key="your-token")

        # Snapshot a VM
        client.snapshots.create("before-upgrade", vm_identifier="vm-uuid")

        # Browse snapshots of that VM
        page = client.snapshots.list_by_vm("vm-uuid", limit=10)
        for snap in page.items:
            print(snap.name, snap.state)

        # Roll back
        client.snapshots.rollback(page.items[0].identifier)

        # Keep a weekly snapshot automatically
        client.snapshots.enable_auto(
            vm_identifier="vm-uuid", period="weekly", weekly_snapshot=1
        )
        ```
    """

    def __init__(self, http: HttpClient) -> None:
        """Initialize snapshots resource.

        Args:
            http: HTTP client instance.
        """
        super().__init__(http)

    def list(self, *, offset: int = 0, limit: int = DEFAULT_LIMIT) -> SnapshotList:
        """List snapshots of the account.

        Args:
            offset: Number of snapshots to skip.
            limit: Maximum number of snapshots to return.

        Returns:
            SnapshotList with items and the server-reported total.
        """
        data = self._http.get(SNAPSHOT_PATH, params=_page_params(offset, limit))
        return _to_list(data, offset, limit)

    def list_by_vm(
        self, vm_identifier: str, *, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> SnapshotList:
        """List snapshots of one VM.

        Args:
            vm_identifier: Identifier of the VM.
            offset: Number of snapshots to skip.
            limit: Maximum number of snapshots to return.

        Returns:
            SnapshotList with items and the server-reported total.
        """
        path = f"{VM_SNAPSHOT_PATH}/{path_segment(vm_identifier, 'vm_identifier')}"
        data = self._http.get(path, params=_page_params(offset, limit))
        return _to_list(data, offset, limit)

    def create(self, name: str, vm_identifier: str) -> None:
        """Take a snapshot of a VM.

        Args:
            name: Snapshot name.
            vm_identifier: Identifier of the VM to snapshot.
        """
        self._http.post(f"{SNAPSHOT_PATH}/add", json=_create_payload(name, vm_identifier))

    def rollback(self, snapshot_identifier: str) -> None:
        """Restore the VM of a snapshot to that snapshot's state.

        Args:
            snapshot_identifier: Identifier of the snapshot.
        """
        self._http.post(
            f"{SNAPSHOT_PATH}/rollback", json=_rollback_payload(snapshot_identifier)
        )

    def enable_auto(
        self, request: EnableAutoSnapshotRequest | None = None, **fields: Any
    ) -> None:
        """Schedule automatic snapshots for a VM.

        Args:
            request: Full schedule request. Alternatively pass its fields as
                keyword arguments (``vm_identifier=...``, ``period=...``).
        """
        self._http.post(
            f"{SNAPSHOT_PATH}/enable/auto", json=_enable_auto_payload(request, fields)
        )

    def delete(self, snapshot_identifier: str, reason: str = "", note: str = "") -> None:
        """Delete a snapshot.

        Args:
            snapshot_identifier: Identifier of the snapshot.
            reason: Deletion reason recorded by the API.
            note: Free-form note recorded by the API.
        """
        self._http.delete(
            SNAPSHOT_PATH, json=_delete_payload(snapshot_identifier, reason, note)
        )


class AsyncSnapshots(AsyncResource):
    """Async VM snapshots."""

    def __init__(self, http: AsyncHttpClient) -> None:
        super().__init__(http)

    async def list(self, *, offset: int = 0, limit: int = DEFAULT_LIMIT) -> SnapshotList:
        """List snapshots of the account."""
        data = await self._http.get(SNAPSHOT_PATH, params=_page_params(offset, limit))
        return _to_list(data, offset, limit)

    async def list_by_vm(
        self, vm_identifier: str, *, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> SnapshotList:
        """List snapshots of one VM."""
        path = f"{VM_SNAPSHOT_PATH}/{path_segment(vm_identifier, 'vm_identifier')}"
        data = await self._http.get(path, params=_page_params(offset, limit))
        return _to_list(data, offset, limit)

    async def create(self, name: str, vm_identifier: str) -> None:
        """Take a snapshot of a VM."""
        await self._http.post(f"{SNAPSHOT_PATH}/add", json=_create_payload(name, vm_identifier))

    async def rollback(self, snapshot_identifier: str) -> None:
        """Restore the VM of a snapshot to that snapshot's state."""
        await self._http.post(
            f"{SNAPSHOT_PATH}/rollback", json=_rollback_payload(snapshot_identifier)
        )

    async def enable_auto(
        self, request: EnableAutoSnapshotRequest | None = None, **fields: Any
    ) -> None:
        """Schedule automatic snapshots for a VM."""
        await self._http.post(
            f"{SNAPSHOT_PATH}/enable/auto", json=_enable_auto_payload(request, fields)
        )

    async def delete(self, snapshot_identifier: str, reason: str = "", note: str = "") -> None:
        """Delete a snapshot."""
        await self._http.delete(
            SNAPSHOT_PATH, json=_delete_payload(snapshot_identifier, reason, note)
        )
