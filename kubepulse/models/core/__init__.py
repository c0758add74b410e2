"""Core telemetry models."""

from kubepulse.models.core.aggregate_metrics import ClusterMetrics, NamespaceMetrics
from kubepulse.models.core.node_metrics import NodeMetrics, ResourceUsage
from kubepulse.models.core.pod_metrics import (
    ContainerMetrics,
    PodMetrics,
    ResourceSpecs,
)

__all__ = [
    "ClusterMetrics",
    "ContainerMetrics",
    "NamespaceMetrics",
    "NodeMetrics",
    "PodMetrics",
    "ResourceSpecs",
    "ResourceUsage",
]
