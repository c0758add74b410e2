"""Shared kubectl fixtures for telemetry tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

TOP_NODES_OUTPUT = """\
node-1                  250m         6%     2147Mi          27%
node-2                  180m         4%     1800Mi          23%
"""

NODES_JSON = """\
{
    "apiVersion": "v1",
    "items": [
        {
            "apiVersion": "v1",
            "kind": "Node",
            "metadata": {
                "labels": {
                    "kubernetes.io/hostname": "node-1"
                },
                "name": "node-1"
            },
            "status": {
                "allocatable": {
                    "cpu": "2000m",
                    "ephemeral-storage": "47093746742",
                    "memory": "4096Mi",
                    "pods": "110"
                },
                "capacity": {
                    "cpu": "2",
                    "ephemeral-storage": "101430960Ki",
                    "memory": "4194304Ki",
                    "pods": "110"
                }
            }
        },
        {
            "apiVersion": "v1",
            "kind": "Node",
            "metadata": {
                "labels": {
                    "kubernetes.io/hostname": "node-2"
                },
                "name": "node-2"
            },
            "status": {
                "allocatable": {
                    "cpu": "2000m",
                    "memory": "4096Mi",
                    "pods": "110"
                },
                "capacity": {
                    "cpu": "2",
                    "memory": "4194304Ki",
                    "pods": "110"
                }
            }
        }
    ],
    "kind": "List",
    "metadata": {
        "resourceVersion": ""
    }
}
"""

POD_JSON = """\
{
    "apiVersion": "v1",
    "kind": "Pod",
    "metadata": {
        "name": "my-pod",
        "namespace": "default"
    },
    "spec": {
        "containers": [
            {
                "image": "nginx:1.25",
                "name": "app",
                "resources": {
                    "limits": {
                        "cpu": "500m",
                        "memory": "256Mi"
                    },
                    "requests": {
                        "cpu": "100m",
                        "memory": "128Mi"
                    }
                }
            },
            {
                "image": "envoyproxy/envoy:v1.29",
                "name": "sidecar",
                "resources": {
                    "limits": {
                        "cpu": "200m",
                        "memory": "64Mi"
                    },
                    "requests": {
                        "cpu": "50m",
                        "memory": "32Mi"
                    }
                }
            }
        ]
    }
}
"""


@pytest.fixture
def data_source() -> MagicMock:
    """Create a ClusterDataSource double with async methods."""
    source = MagicMock()
    source.run = AsyncMock(return_value=TOP_NODES_OUTPUT)
    source.run_with_namespace = AsyncMock(return_value="")
    source.run_json = AsyncMock(return_value=NODES_JSON.encode("utf-8"))
    source.get_json = AsyncMock(return_value=POD_JSON.encode("utf-8"))
    return source


@pytest.fixture
def top_nodes_output() -> str:
    return TOP_NODES_OUTPUT


@pytest.fixture
def nodes_json() -> str:
    return NODES_JSON


@pytest.fixture
def pod_json() -> str:
    return POD_JSON
