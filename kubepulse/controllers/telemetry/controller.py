"""Telemetry controller - usage metrics from metrics-server via kubectl top."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from kubepulse.constants.defaults import DEFAULT_NAMESPACE
from kubepulse.constants.enums import MetricsSource
from kubepulse.controllers.base import (
    BaseController,
    ClusterDataSource,
    MetricsFetchError,
    ResourceNotFoundError,
    best_effort,
)
from kubepulse.controllers.telemetry.parsers import DescriptorParser, TopParser
from kubepulse.models.core import (
    ClusterMetrics,
    ContainerMetrics,
    NamespaceMetrics,
    NodeMetrics,
    PodMetrics,
    ResourceSpecs,
)
from kubepulse.utils.resource_parser import (
    cpu_to_millicores,
    format_bytes,
    format_millicores,
    memory_to_bytes,
)

logger = logging.getLogger(__name__)


class TelemetryController(BaseController):
    """Aggregates node, namespace, pod and container usage.

    Every operation fetches fresh data; nothing is cached between calls.
    A failing primary fetch raises MetricsFetchError, while enrichment
    fetches go through ``best_effort`` and leave their fields unset.
    """

    def __init__(
        self, data_source: ClusterDataSource, default_namespace: str = DEFAULT_NAMESPACE
    ) -> None:
        super().__init__(data_source)
        self.default_namespace = default_namespace or DEFAULT_NAMESPACE
        self._top_parser = TopParser()
        self._descriptor_parser = DescriptorParser()

    async def check_connection(self) -> bool:
        """Return True when metrics-server answers `top nodes`."""
        try:
            await self._data_source.run("top", "nodes", "--no-headers")
        except Exception as exc:
            logger.debug("metrics-server unavailable: %s", exc)
            return False
        return True

    async def _fetch(self, what: str, *args: str, namespace: str | None = None) -> str:
        try:
            if namespace is None:
                return await self._data_source.run(*args)
            return await self._data_source.run_with_namespace(namespace, *args)
        except Exception as exc:
            raise MetricsFetchError(f"failed to get {what} metrics: {exc}") from exc

    # =========================================================================
    # Nodes and cluster
    # =========================================================================

    async def node_metrics(self) -> list[NodeMetrics]:
        """Usage of every node, enriched with allocatable and capacity."""
        output = await self._fetch("node", "top", "nodes", "--no-headers")
        nodes = self._top_parser.parse_nodes(output)

        allocatable = await best_effort(
            "get node allocatable", self._node_allocatable(), {}
        )
        for node in nodes:
            info = allocatable.get(node.name)
            if info is not None:
                node.allocatable = info.allocatable
                node.capacity = info.capacity
        return nodes

    async def _node_allocatable(self) -> dict[str, NodeMetrics]:
        document = await self._data_source.run_json("get", "nodes")
        return self._descriptor_parser.parse_node_allocatable(document)

    async def cluster_metrics(self) -> ClusterMetrics:
        """Cluster totals summed over nodes.

        Percentages come from the summed totals, not from averaging the
        per-node percentages. Every node reporting usage counts as ready.
        """
        nodes = await self.node_metrics()

        used_cpu = total_cpu = 0
        used_memory = total_memory = 0
        for node in nodes:
            used_cpu += cpu_to_millicores(node.cpu_usage)
            used_memory += memory_to_bytes(node.memory_usage)
            total_cpu += cpu_to_millicores(node.allocatable.cpu)
            total_memory += memory_to_bytes(node.allocatable.memory)

        return ClusterMetrics(
            timestamp=datetime.now(timezone.utc),
            source=MetricsSource.METRICS_SERVER,
            nodes=nodes,
            node_count=len(nodes),
            ready_nodes=len(nodes),
            total_cpu=format_millicores(total_cpu),
            used_cpu=format_millicores(used_cpu),
            total_memory=format_bytes(total_memory),
            used_memory=format_bytes(used_memory),
            cpu_percent=used_cpu / total_cpu * 100 if total_cpu > 0 else 0.0,
            memory_percent=(
                used_memory / total_memory * 100 if total_memory > 0 else 0.0
            ),
        )

    # =========================================================================
    # Namespaces and pods
    # =========================================================================

    async def namespace_metrics(self, namespace: str) -> NamespaceMetrics:
        """Pod usage in one namespace with summed totals."""
        namespace = namespace or self.default_namespace
        pods = await self.all_pod_metrics(namespace, all_namespaces=False)

        total_cpu = sum(cpu_to_millicores(pod.cpu_usage) for pod in pods)
        total_memory = sum(memory_to_bytes(pod.memory_usage) for pod in pods)
        return NamespaceMetrics(
            namespace=namespace,
            source=MetricsSource.METRICS_SERVER,
            pods=pods,
            pod_count=len(pods),
            total_cpu=format_millicores(total_cpu),
            total_memory=format_bytes(total_memory),
        )

    async def all_pod_metrics(
        self, namespace: str = "", all_namespaces: bool = False
    ) -> list[PodMetrics]:
        """Usage of every pod in a namespace, or cluster-wide."""
        if all_namespaces:
            output = await self._fetch(
                "pod", "top", "pods", "--all-namespaces", "--no-headers"
            )
        else:
            namespace = namespace or self.default_namespace
            output = await self._fetch(
                "pod", "top", "pods", "--no-headers", namespace=namespace
            )
        return self._top_parser.parse_pods(output, namespace)

    async def pod_metrics(self, name: str, namespace: str = "") -> PodMetrics:
        """Usage of one pod with its containers and requests/limits.

        Raises:
            MetricsFetchError: The usage fetch failed.
            ResourceNotFoundError: The pod is not in the usage output.
        """
        namespace = namespace or self.default_namespace
        output = await self._fetch(
            "pod", "top", "pod", name, "--no-headers", namespace=namespace
        )
        pods = self._top_parser.parse_pods(output, namespace)
        if not pods:
            raise ResourceNotFoundError("pod", name, namespace)
        pod = pods[0]

        pod.containers = await best_effort(
            f"get container metrics for pod {name}",
            self.container_metrics(name, namespace, with_specs=False),
            [],
        )
        specs = await best_effort(
            f"get resource specs for pod {name}",
            self._pod_resource_specs(name, namespace),
            None,
        )
        if specs is not None:
            pod.apply_resource_specs(specs)
        return pod

    async def _pod_resource_specs(self, name: str, namespace: str) -> ResourceSpecs:
        document = await self._data_source.get_json("pod", name, namespace)
        return self._descriptor_parser.parse_resource_specs(document)

    # =========================================================================
    # Containers
    # =========================================================================

    async def container_metrics(
        self, pod: str, namespace: str = "", with_specs: bool = True
    ) -> list[ContainerMetrics]:
        """Per-container usage of one pod.

        With ``with_specs`` each container also gets its requests/limits and
        percent-of-limit from the pod descriptor when that can be fetched.
        """
        namespace = namespace or self.default_namespace
        output = await self._fetch(
            "container",
            "top",
            "pod",
            pod,
            "--containers",
            "--no-headers",
            namespace=namespace,
        )
        containers = self._top_parser.parse_containers(output)
        if with_specs and containers:
            document = await best_effort(
                f"get resource specs for pod {pod}",
                self._data_source.get_json("pod", pod, namespace),
                None,
            )
            if document is not None:
                for container in containers:
                    container.apply_resource_specs(
                        self._descriptor_parser.parse_resource_specs(
                            document, container=container.name
                        )
                    )
        return containers
