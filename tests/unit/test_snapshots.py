"""Tests for Snapshots resource."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import respx

from vpsie._http import HttpClient
from vpsie.exceptions import APIError
from vpsie.models.snapshot import EnableAutoSnapshotRequest
from vpsie.resources.snapshots import Snapshots

BASE_URL = "https://api.example.com/apps/v2"


def _ok(data: Any = None, **extra: Any) -> httpx.Response:
    return httpx.Response(200, json={"error": False, "data": data, **extra})


class TestSnapshotsList:
    """Test snapshot listings."""

    def test_list(
        self, mock_api: respx.MockRouter, http: HttpClient, sample_snapshot: dict[str, Any]
    ) -> None:
        """List should decode snapshots and the reported total."""
        route = mock_api.get(f"{BASE_URL}/snapshot").mock(
            return_value=_ok([sample_snapshot], total=31)
        )

        page = Snapshots(http).list(offset=20, limit=10)

        params = route.calls.last.request.url.params
        assert params["offset"] == "20"
        assert params["limit"] == "10"
        assert page.total == 31
        assert page.offset == 20
        assert page.limit == 10
        snap = page.items[0]
        assert snap.identifier == "snap-0001"
        assert snap.vm_identifier == "vm-0001"
        assert snap.backup_key == "bk-abc"
        assert snap.backup_sha1.startswith("da39")
        assert snap.is_snapshot == 1

    def test_list_default_paging(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """Default paging should start at offset 0 with limit 20."""
        route = mock_api.get(f"{BASE_URL}/snapshot").mock(return_value=_ok([]))

        page = Snapshots(http).list()

        params = route.calls.last.request.url.params
        assert params["offset"] == "0"
        assert params["limit"] == "20"
        assert page.items == []
        assert page.total == 0

    def test_list_total_falls_back_to_item_count(
        self, mock_api: respx.MockRouter, http: HttpClient, sample_snapshot: dict[str, Any]
    ) -> None:
        """Without a total in the envelope, total is the number of items."""
        mock_api.get(f"{BASE_URL}/snapshot").mock(return_value=_ok([sample_snapshot]))

        assert Snapshots(http).list().total == 1

    @pytest.mark.parametrize(("offset", "limit"), [(-1, 20), (0, 0)])
    def test_list_rejects_bad_paging(self, http: HttpClient, offset: int, limit: int) -> None:
        """Negative offsets and empty pages are rejected locally."""
        with pytest.raises(ValueError):
            Snapshots(http).list(offset=offset, limit=limit)

    def test_list_by_vm(
        self, mock_api: respx.MockRouter, http: HttpClient, sample_snapshot: dict[str, Any]
    ) -> None:
        """list_by_vm should hit the VM snapshot path."""
        route = mock_api.get(f"{BASE_URL}/vm/snapshot/vm-0001").mock(
            return_value=_ok([sample_snapshot, {**sample_snapshot, "identifier": "snap-0002"}])
        )

        page = Snapshots(http).list_by_vm("vm-0001", limit=5)

        assert route.called
        assert route.calls.last.request.url.params["limit"] == "5"
        assert [s.identifier for s in page.items] == ["snap-0001", "snap-0002"]

    def test_list_by_vm_rejects_empty_identifier(
        self, mock_api: respx.MockRouter, http: HttpClient
    ) -> None:
        """An empty VM identifier should not reach the API."""
        with pytest.raises(ValueError, match="vm_identifier"):
            Snapshots(http).list_by_vm("")

        assert not mock_api.calls

    def test_list_null_scalars(
        self,
        mock_api: respx.MockRouter,
        http: HttpClient,
        sample_snapshot: dict[str, Any],
    ) -> None:
        """Null name or user_id in one snapshot decodes to defaults."""
        mock_api.get(f"{BASE_URL}/snapshot").mock(
            return_value=_ok([{**sample_snapshot, "name": None, "user_id": None}], total=1)
        )

        page = Snapshots(http).list()

        assert page.items[0].name == ""
        assert page.items[0].user_id == 0


class TestSnapshotsWrite:
    """Test snapshot mutations."""

    def test_create(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """Create should post the name and VM identifier."""
        route = mock_api.post(f"{BASE_URL}/snapshot/add").mock(return_value=_ok())

        Snapshots(http).create("before-upgrade", "vm-0001")

        assert json.loads(route.calls.last.request.content) == {
            "name": "before-upgrade",
            "vmIdentifier": "vm-0001",
        }

    def test_create_sends_name_unchanged(
        self, mock_api: respx.MockRouter, http: HttpClient
    ) -> None:
        """The snapshot name is a label, so surrounding spaces are kept."""
        route = mock_api.post(f"{BASE_URL}/snapshot/add").mock(return_value=_ok())

        Snapshots(http).create(" nightly ", "vm-0001")

        assert json.loads(route.calls.last.request.content)["name"] == " nightly "

    def test_create_rejects_blank_name(
        self, mock_api: respx.MockRouter, http: HttpClient
    ) -> None:
        """A blank name fails before any request is sent."""
        with pytest.raises(ValueError, match="name"):
            Snapshots(http).create("   ", "vm-0001")

        assert not mock_api.calls

    def test_rollback(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """Rollback should post the snapshot identifier."""
        route = mock_api.post(f"{BASE_URL}/snapshot/rollback").mock(return_value=_ok())

        Snapshots(http).rollback("snap-0001")

        assert json.loads(route.calls.last.request.content) == {
            "snapshotIdentifier": "snap-0001"
        }

    def test_enable_auto(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """enable_auto should post the schedule with wire names."""
        route = mock_api.post(f"{BASE_URL}/snapshot/enable/auto").mock(return_value=_ok())

        Snapshots(http).enable_auto(
            EnableAutoSnapshotRequest(
                vm_identifier="vm-0001",
                vm_id=42,
                period="weekly",
                weekly_snapshot=2,
                tags=["prod", "web"],
            )
        )

        assert json.loads(route.calls.last.request.content) == {
            "vmIdentifier": "vm-0001",
            "vmId": 42,
            "period": "weekly",
            "dailySnapshot": 0,
            "weeklySnapshot": 2,
            "monthlySnapshot": 0,
            "tags": ["prod", "web"],
        }

    def test_enable_auto_with_keywords(
        self, mock_api: respx.MockRouter, http: HttpClient
    ) -> None:
        """enable_auto should accept the schedule as keyword arguments."""
        route = mock_api.post(f"{BASE_URL}/snapshot/enable/auto").mock(return_value=_ok())

        Snapshots(http).enable_auto(vm_identifier="vm-0001", period="daily", daily_snapshot=7)

        body = json.loads(route.calls.last.request.content)
        assert body["period"] == "daily"
        assert body["dailySnapshot"] == 7
        assert body["tags"] == []

    def test_delete(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """Delete should send identifier and statistic to the collection path."""
        route = mock_api.delete(f"{BASE_URL}/snapshot").mock(return_value=_ok())

        Snapshots(http).delete("snap-0001", reason="obsolete", note="")

        request = route.calls.last.request
        assert request.method == "DELETE"
        assert json.loads(request.content) == {
            "snapshotIdentifier": "snap-0001",
            "deleteStatistic": {"reason": "obsolete", "note": ""},
        }

    def test_delete_rejects_empty_identifier(
        self, mock_api: respx.MockRouter, http: HttpClient
    ) -> None:
        """Deleting without an identifier is rejected locally."""
        with pytest.raises(ValueError, match="snapshot_identifier"):
            Snapshots(http).delete(" ")

        assert not mock_api.calls

    def test_rollback_error_envelope(self, mock_api: respx.MockRouter, http: HttpClient) -> None:
        """An error envelope on a 2xx response should propagate as APIError."""
        route = mock_api.post(f"{BASE_URL}/snapshot/rollback").mock(
            return_value=httpx.Response(
                200, json={"error": True, "message": "Snapshot is still in progress"}
            )
        )

        with pytest.raises(APIError, match="still in progress"):
            Snapshots(http).rollback("snap-0001")

        assert route.call_count == 1
