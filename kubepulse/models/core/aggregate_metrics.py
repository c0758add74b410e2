"""Cluster and namespace aggregates."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kubepulse.constants.enums import MetricsSource
from kubepulse.models.core.node_metrics import NodeMetrics
from kubepulse.models.core.pod_metrics import PodMetrics


class ClusterMetrics(BaseModel):
    """Cluster-wide usage summed over every node reporting metrics."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: MetricsSource = MetricsSource.METRICS_SERVER
    nodes: list[NodeMetrics] = Field(default_factory=list)
    node_count: int = 0
    ready_nodes: int = 0
    total_cpu: str = ""
    used_cpu: str = ""
    total_memory: str = ""
    used_memory: str = ""
    cpu_percent: float = 0.0
    memory_percent: float = 0.0


class NamespaceMetrics(BaseModel):
    """Usage summed over the pods of one namespace.

    There is no namespace-level allocatable, so no percentages either.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    namespace: str
    source: MetricsSource = MetricsSource.METRICS_SERVER
    pods: list[PodMetrics] = Field(default_factory=list)
    pod_count: int = 0
    total_cpu: str = ""
    total_memory: str = ""
