"""Pydantic models for VPSie SDK."""

from vpsie.models.common import DeleteStatistic, Envelope, VpsieModel
from vpsie.models.k8s import (
    CreateK8sRequest,
    K8sCluster,
    K8sClusterSummary,
    K8sNode,
)
from vpsie.models.snapshot import EnableAutoSnapshotRequest, Snapshot, SnapshotList

__all__ = [
    # Common
    "VpsieModel",
    "Envelope",
    "DeleteStatistic",
    # K8s
    "K8sCluster",
    "K8sClusterSummary",
    "K8sNode",
    "CreateK8sRequest",
    # Snapshot
    "Snapshot",
    "SnapshotList",
    "EnableAutoSnapshotRequest",
]
