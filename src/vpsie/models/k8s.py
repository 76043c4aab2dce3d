"""Kubernetes cluster models for VPSie SDK."""

from __future__ import annotations

from pydantic import Field

from vpsie.models.common import VpsieModel


class K8sNode(VpsieModel):
    """Node belonging to a managed Kubernetes cluster."""

    id: int = Field(0, description="Node ID")
    user_id: int = Field(0, description="Owner user ID")
    hostname: str = Field("", description="Node hostname")
    default_ip: str | None = Field(None, description="Public IP address")
    private_ip: str | None = Field(None, description="Private IP address")
    node_type: int = Field(0, description="Node role (manager or worker)")
    node_id: int = Field(0, description="Backing VM ID")
    datacenter_id: int = Field(0, description="Datacenter ID")
    created_on: str | None = Field(None, description="Creation timestamp")


class _K8sClusterBase(VpsieModel):
    cluster_name: str = Field("", description="Cluster name")
    identifier: str = Field(..., description="Cluster identifier")
    count: int = Field(0, description="Number of nodes")
    created_on: str | None = Field(None, description="Creation timestamp")
    updated_on: str | None = Field(None, description="Last update timestamp")
    created_by: str | None = Field(None, description="Creator")
    nickname: str | None = Field(None, description="Display name")
    cpu: int = Field(0, description="Total vCPUs")
    ram: int = Field(0, description="Total RAM in MB")
    traffic: int = Field(0, description="Traffic allowance")
    color: str | None = Field(None, description="Dashboard color tag")
    price: float = Field(0.0, description="Monthly price")


class K8sCluster(_K8sClusterBase):
    """Kubernetes cluster with its nodes, as returned by a single fetch."""

    nodes: list[K8sNode] = Field(default_factory=list, description="Cluster nodes")


class K8sClusterSummary(_K8sClusterBase):
    """Kubernetes cluster entry of the cluster listing."""

    manager_count: int = Field(0, alias="managerCount", description="Manager node count")
    slave_count: int = Field(0, alias="slaveCount", description="Worker node count")


class CreateK8sRequest(VpsieModel):
    """Request body for creating a Kubernetes cluster."""

    cluster_name: str = Field(..., alias="clusterName")
    dc_identifier: str = Field(..., alias="dcIdentifier")
    nodes_count_master: int = Field(1, alias="nodesCountMaster")
    nodes_count_slave: int = Field(1, alias="nodesCountSlave")
    vpc_id: int = Field(0, alias="vpcId")
    kuber_ver: int = Field(0, alias="kuberVer")
    resource_identifier: str = Field("", alias="resourceIdentifier")
    project_identifier: str = Field("", alias="projectIdentifier")
