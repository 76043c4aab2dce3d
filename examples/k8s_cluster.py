"""Example: Kubernetes cluster lifecycle

Creates a cluster, scales its workers and tears it down with VpsieClient.
"""

import time

from vpsie import CreateK8sRequest, VpsieClient


def main():
    # Initialize client - reads VPSIE_API_KEY or ~/.vpsie/config.toml
    client = VpsieClient()

    client.k8s.create(
        CreateK8sRequest(
            cluster_name="example-cluster",
            dc_identifier="your-datacenter-identifier",
            nodes_count_master=1,
            nodes_count_slave=2,
            resource_identifier="your-plan-identifier",
            project_identifier="your-project-identifier",
        )
    )
    print("Cluster creation requested")

    # Creation is asynchronous on the API side; wait for it to show up
    cluster = None
    for _ in range(30):
        cluster = next(
            (c for c in client.k8s.list() if c.cluster_name == "example-cluster"), None
        )
        if cluster is not None:
            break
        time.sleep(10)

    if cluster is None:
        print("Cluster did not appear in time")
        return

    print(f"Cluster {cluster.identifier}: {cluster.slave_count} workers")

    client.k8s.add_slave(cluster.identifier)
    details = client.k8s.get(cluster.identifier)
    for node in details.nodes:
        print(f"  {node.hostname} {node.default_ip}")

    client.k8s.delete(cluster.identifier, reason="example", note="cleanup")
    client.close()


if __name__ == "__main__":
    main()
