"""API resource modules."""

from vpsie.resources.k8s import AsyncK8s, K8s
from vpsie.resources.snapshots import AsyncSnapshots, Snapshots

__all__ = [
    "K8s",
    "AsyncK8s",
    "Snapshots",
    "AsyncSnapshots",
]
