"""Kubernetes clusters resource for VPSie SDK."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any

from vpsie.models.common import DeleteStatistic
from vpsie.models.k8s import CreateK8sRequest, K8sCluster, K8sClusterSummary
from vpsie.resources._base import AsyncResource, SyncResource, path_segment, unwrap, unwrap_list

if TYPE_CHECKING:
    from vpsie._http import AsyncHttpClient, HttpClient

K8S_PATH = "/k8s"


def _cluster_path(identifier: str, suffix: str = "") -> str:
    return f"{K8S_PATH}/cluster/byId/{path_segment(identifier)}{suffix}"


def _create_payload(request: CreateK8sRequest | None, fields: dict[str, Any]) -> dict[str, Any]:
    if request is None:
        request = CreateK8sRequest(**fields)
    elif fields:
        raise TypeError("Pass either a CreateK8sRequest or keyword fields, not both")
    return request.to_payload()


def _delete_payload(reason: str, note: str) -> dict[str, Any]:
    return {"deleteStatistic": DeleteStatistic(reason=reason, note=note).to_payload()}


class K8s(SyncResource):
    """Managed Kubernetes clusters.

    Example:
        ```python
        from vpsie import VpsieClient

        client = VpsieClient(api_key="your-token")

        # List clusters
        for cluster in client.k8s.list():
            print(f"{cluster.cluster_name}: {cluster.slave_count} workers")

        # Create a cluster
        client.k8s.create(
            cluster_name="prod",
            dc_identifier="dc-uuid",
            nodes_count_master=1,
            nodes_count_slave=3,
            resource_identifier="plan-uuid",
            project_identifier="project-uuid",
        )

        # Scale workers
        client.k8s.add_slave("cluster-uuid")
        ```
    """

    def __init__(self, http: HttpClient) -> None:
        """Initialize k8s resource.

        Args:
            http: HTTP client instance.
        """
        super().__init__(http)

    def list(self) -> builtins.list[K8sClusterSummary]:
        """List all clusters of the account.

        Returns:
            Cluster summaries.
        """
        data = self._http.get(f"{K8S_PATH}/cluster/all")
        return unwrap_list(K8sClusterSummary, data).data

    def get(self, identifier: str) -> K8sCluster:
        """Get a cluster with its nodes.

        Args:
            identifier: The cluster identifier.

        Returns:
            Cluster details.
        """
        data = self._http.get(_cluster_path(identifier))
        return unwrap(K8sCluster, data)

    def create(self, request: CreateK8sRequest | None = None, **fields: Any) -> None:
        """Create a new cluster.

        Args:
            request: Full create request. Alternatively pass its fields as
                keyword arguments (``cluster_name=...``, ``dc_identifier=...``).
        """
        self._http.post(f"{K8S_PATH}/create/cluster", json=_create_payload(request, fields))

    def delete(self, identifier: str, reason: str = "", note: str = "") -> None:
        """Delete a cluster.

        Args:
            identifier: The cluster identifier.
            reason: Deletion reason recorded by the API.
            note: Free-form note recorded by the API.
        """
        self._http.delete(_cluster_path(identifier), json=_delete_payload(reason, note))

    def add_slave(self, identifier: str) -> None:
        """Add one worker node to a cluster."""
        self._http.post(_cluster_path(identifier, "/add/slave"))

    def remove_slave(self, identifier: str) -> None:
        """Remove one worker node from a cluster."""
        self._http.delete(_cluster_path(identifier, "/reduce"))


class AsyncK8s(AsyncResource):
    """Async managed Kubernetes clusters."""

    def __init__(self, http: AsyncHttpClient) -> None:
        super().__init__(http)

    async def list(self) -> builtins.list[K8sClusterSummary]:
        """List all clusters of the account."""
        data = await self._http.get(f"{K8S_PATH}/cluster/all")
        return unwrap_list(K8sClusterSummary, data).data

    async def get(self, identifier: str) -> K8sCluster:
        """Get a cluster with its nodes."""
        data = await self._http.get(_cluster_path(identifier))
        return unwrap(K8sCluster, data)

    async def create(self, request: CreateK8sRequest | None = None, **fields: Any) -> None:
        """Create a new cluster."""
        await self._http.post(
            f"{K8S_PATH}/create/cluster", json=_create_payload(request, fields)
        )

    async def delete(self, identifier: str, reason: str = "", note: str = "") -> None:
        """Delete a cluster."""
        await self._http.delete(_cluster_path(identifier), json=_delete_payload(reason, note))

    async def add_slave(self, identifier: str) -> None:
        """Add one worker node to a cluster."""
        await self._http.post(_cluster_path(identifier, "/add/slave"))

    async def remove_slave(self, identifier: str) -> None:
        """Remove one worker node from a cluster."""
        await self._http.delete(_cluster_path(identifier, "/reduce"))
