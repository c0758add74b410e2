"""Telemetry router - answers free-text queries with a response envelope."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import TypeVar

from kubepulse.constants.enums import MetricsScope, SortKey
from kubepulse.controllers.base.data_source import ClusterDataSource
from kubepulse.controllers.telemetry.controller import TelemetryController
from kubepulse.controllers.telemetry.fetchers import KubectlDataSource
from kubepulse.controllers.telemetry.parsers import QueryParser
from kubepulse.models.core import ContainerMetrics, NodeMetrics, PodMetrics
from kubepulse.models.query import QueryIntent, QueryOptions, TelemetryResponse
from kubepulse.models.state.settings import ConfigManager, TelemetrySettings
from kubepulse.utils.resource_parser import cpu_to_millicores, memory_to_bytes

logger = logging.getLogger(__name__)

_Named = TypeVar("_Named", NodeMetrics, ContainerMetrics)


def merge_options(intent: QueryIntent, options: QueryOptions) -> QueryOptions:
    """Fill unset options from the intent; explicit options always win."""
    merged = replace(options)
    if merged.scope is None:
        merged.scope = intent.scope
    if not merged.node_name:
        merged.node_name = intent.target
    if not merged.pod_name:
        if intent.scope is MetricsScope.POD:
            merged.pod_name = intent.target
        elif intent.scope is MetricsScope.CONTAINER:
            merged.pod_name = intent.pod_name
    if not merged.namespace:
        merged.namespace = intent.namespace
    if merged.sort_by is SortKey.NONE:
        merged.sort_by = intent.sort_by
    return merged


def find_by_name(items: list[_Named], name: str) -> _Named | None:
    """Return the exact name match, else the first item whose name contains it."""
    for item in items:
        if item.name == name:
            return item
    for item in items:
        if name in item.name:
            return item
    return None


def sort_nodes(nodes: list[NodeMetrics], sort_by: SortKey) -> list[NodeMetrics]:
    """Stable sort, highest reported percentage first."""
    if sort_by is SortKey.CPU:
        return sorted(nodes, key=lambda n: n.cpu_percent, reverse=True)
    if sort_by is SortKey.MEMORY:
        return sorted(nodes, key=lambda n: n.memory_percent, reverse=True)
    return nodes


def sort_pods(pods: list[PodMetrics], sort_by: SortKey) -> list[PodMetrics]:
    """Stable sort, highest parsed usage first."""
    if sort_by is SortKey.CPU:
        return sorted(pods, key=lambda p: cpu_to_millicores(p.cpu_usage), reverse=True)
    if sort_by is SortKey.MEMORY:
        return sorted(pods, key=lambda p: memory_to_bytes(p.memory_usage), reverse=True)
    return pods


class TelemetryRouter:
    """Classifies a query, dispatches it by scope and wraps the outcome.

    ``handle_query`` always returns a TelemetryResponse; operation failures
    become error envelopes. Only cancellation escapes.
    """

    def __init__(
        self,
        data_source: ClusterDataSource | None = None,
        *,
        controller: TelemetryController | None = None,
        query_parser: QueryParser | None = None,
    ) -> None:
        if controller is None:
            if data_source is None:
                raise ValueError("data_source or controller is required")
            controller = TelemetryController(data_source)
        self.controller = controller
        self.query_parser = query_parser or QueryParser()
        self._handlers: dict[
            MetricsScope, Callable[[QueryOptions], Awaitable[TelemetryResponse]]
        ] = {
            MetricsScope.CLUSTER: self._handle_cluster,
            MetricsScope.NODE: self._handle_nodes,
            MetricsScope.NAMESPACE: self._handle_namespace,
            MetricsScope.POD: self._handle_pods,
            MetricsScope.CONTAINER: self._handle_containers,
        }

    @classmethod
    def from_settings(
        cls, settings: TelemetrySettings | None = None
    ) -> TelemetryRouter:
        """Build a router over kubectl.

        Without ``settings`` they are loaded from the default settings file
        and environment via ConfigManager.
        """
        if settings is None:
            settings = ConfigManager.load()
        controller = TelemetryController(
            KubectlDataSource(settings), settings.default_namespace
        )
        return cls(controller=controller)

    async def handle_query(
        self, query: str, options: QueryOptions | None = None
    ) -> TelemetryResponse:
        logger.debug("Handling telemetry query: %s", query)
        intent = self.query_parser.analyze(query)
        resolved = merge_options(intent, options or QueryOptions())
        handler = self._handlers.get(resolved.scope, self._handle_cluster)
        try:
            return await handler(resolved)
        except Exception as exc:
            scope = resolved.scope.value
            logger.warning("Telemetry query failed (scope=%s): %s", scope, exc)
            return TelemetryResponse.failure(
                f"Failed to get {scope} metrics: {exc}", exc
            )

    async def _handle_cluster(self, options: QueryOptions) -> TelemetryResponse:
        result = await self.controller.cluster_metrics()
        return TelemetryResponse.result(
            result,
            f"Cluster metrics: {result.node_count} nodes, "
            f"CPU {result.used_cpu}/{result.total_cpu} ({result.cpu_percent:.1f}%), "
            f"Memory {result.used_memory}/{result.total_memory} "
            f"({result.memory_percent:.1f}%)",
        )

    async def _handle_nodes(self, options: QueryOptions) -> TelemetryResponse:
        nodes = await self.controller.node_metrics()

        if options.node_name:
            node = find_by_name(nodes, options.node_name)
            if node is None:
                return TelemetryResponse.failure(
                    f"Node '{options.node_name}' not found"
                )
            return TelemetryResponse.result(
                node,
                f"Node {node.name}: CPU {node.cpu_usage} ({node.cpu_percent:.1f}%), "
                f"Memory {node.memory_usage} ({node.memory_percent:.1f}%)",
            )

        nodes = sort_nodes(nodes, options.sort_by)
        return TelemetryResponse.result(nodes, f"Found {len(nodes)} nodes")

    async def _handle_namespace(self, options: QueryOptions) -> TelemetryResponse:
        result = await self.controller.namespace_metrics(options.namespace)
        return TelemetryResponse.result(
            result,
            f"Namespace {result.namespace}: {result.pod_count} pods, "
            f"CPU {result.total_cpu}, Memory {result.total_memory}",
        )

    async def _handle_pods(self, options: QueryOptions) -> TelemetryResponse:
        if options.pod_name:
            pod = await self.controller.pod_metrics(options.pod_name, options.namespace)
            return TelemetryResponse.result(
                pod,
                f"Pod {pod.namespace}/{pod.name}: "
                f"CPU {pod.cpu_usage}, Memory {pod.memory_usage}",
            )

        pods = await self.controller.all_pod_metrics(
            options.namespace, options.all_namespaces
        )
        pods = sort_pods(pods, options.sort_by)
        return TelemetryResponse.result(pods, f"Found {len(pods)} pods")

    async def _handle_containers(self, options: QueryOptions) -> TelemetryResponse:
        if not options.pod_name:
            return TelemetryResponse.failure(
                "Pod name is required for container metrics"
            )

        containers = await self.controller.container_metrics(
            options.pod_name, options.namespace
        )

        if options.container_name:
            container = find_by_name(containers, options.container_name)
            if container is None:
                return TelemetryResponse.failure(
                    f"Container '{options.container_name}' not found "
                    f"in pod '{options.pod_name}'"
                )
            return TelemetryResponse.result(
                container,
                f"Container {container.name}: "
                f"CPU {container.cpu_usage}, Memory {container.memory_usage}",
            )

        return TelemetryResponse.result(
            containers,
            f"Found {len(containers)} containers in pod {options.pod_name}",
        )
