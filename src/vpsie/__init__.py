"""
VPSie SDK - Python client for the VPSie cloud API.

Kubernetes clusters and VM snapshots from Python.
"""

from vpsie._version import __version__
from vpsie.auth import APIKeyAuth, AuthProvider
from vpsie.client import AsyncVpsieClient, VpsieClient
from vpsie.exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    ValidationError,
    VpsieError,
)
from vpsie.models import (
    CreateK8sRequest,
    EnableAutoSnapshotRequest,
    K8sCluster,
    K8sClusterSummary,
    K8sNode,
    Snapshot,
    SnapshotList,
)

__all__ = [
    # Version
    "__version__",
    # Clients
    "VpsieClient",
    "AsyncVpsieClient",
    # Auth
    "AuthProvider",
    "APIKeyAuth",
    # Exceptions
    "VpsieError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "NotFoundError",
    "ServerError",
    "ConnectionError",
    "TimeoutError",
    # Models
    "K8sCluster",
    "K8sClusterSummary",
    "K8sNode",
    "CreateK8sRequest",
    "Snapshot",
    "SnapshotList",
    "EnableAutoSnapshotRequest",
]
