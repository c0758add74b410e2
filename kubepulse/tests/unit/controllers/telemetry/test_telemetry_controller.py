"""Tests for telemetry controller."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from kubepulse.constants.enums import MetricsSource
from kubepulse.controllers.base.errors import (
    KubectlCommandError,
    MetricsFetchError,
    ResourceNotFoundError,
)
from kubepulse.controllers.telemetry.controller import TelemetryController

POD_TOP_OUTPUT = "my-pod   250m   128Mi"
CONTAINERS_TOP_OUTPUT = """\
my-pod   app       250m   128Mi
my-pod   sidecar   100m   32Mi
"""


def _namespaced_outputs(pod: str = POD_TOP_OUTPUT, containers: str = CONTAINERS_TOP_OUTPUT):
    """Answer run_with_namespace by whether the container breakdown was asked for."""

    def _run(namespace: str, *args: str) -> str:
        if "--containers" in args:
            return containers
        return pod

    return _run


class TestTelemetryController:
    """Tests for TelemetryController class."""

    @pytest.fixture
    def controller(self, data_source: MagicMock) -> TelemetryController:
        """Create TelemetryController with a mocked data source."""
        return TelemetryController(data_source)

    def test_controller_init(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        assert controller.data_source is data_source

    # =========================================================================
    # Connection
    # =========================================================================

    @pytest.mark.asyncio
    async def test_check_connection_success(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        assert await controller.check_connection() is True
        data_source.run.assert_awaited_once_with("top", "nodes", "--no-headers")

    @pytest.mark.asyncio
    async def test_check_connection_failure(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run.side_effect = KubectlCommandError(
            ("top", "nodes"), "Metrics API not available"
        )

        assert await controller.check_connection() is False

    # =========================================================================
    # Nodes and cluster
    # =========================================================================

    @pytest.mark.asyncio
    async def test_node_metrics_enriched_with_allocatable(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        nodes = await controller.node_metrics()

        assert [n.name for n in nodes] == ["node-1", "node-2"]
        assert nodes[0].cpu_percent == 6.0
        assert nodes[0].allocatable.cpu == "2000m"
        assert nodes[0].capacity.memory == "4194304Ki"
        data_source.run_json.assert_awaited_once_with("get", "nodes")

    @pytest.mark.asyncio
    async def test_node_metrics_allocatable_failure_is_absorbed(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        """A failing descriptor fetch leaves allocatable unset."""
        data_source.run_json.side_effect = KubectlCommandError(
            ("get", "nodes"), "forbidden"
        )

        nodes = await controller.node_metrics()

        assert len(nodes) == 2
        assert all(not n.allocatable.is_set for n in nodes)

    @pytest.mark.asyncio
    async def test_node_metrics_fetch_failure(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        cause = KubectlCommandError(("top", "nodes"), "metrics not available")
        data_source.run.side_effect = cause

        with pytest.raises(MetricsFetchError) as exc_info:
            await controller.node_metrics()

        assert str(exc_info.value) == "failed to get node metrics: metrics not available"
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_node_metrics_cancellation_propagates(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await controller.node_metrics()

    @pytest.mark.asyncio
    async def test_node_metrics_cancellation_during_enrichment(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        """Cancellation is not absorbed like an enrichment failure."""
        data_source.run_json.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await controller.node_metrics()

    @pytest.mark.asyncio
    async def test_cluster_metrics_totals(self, controller: TelemetryController) -> None:
        result = await controller.cluster_metrics()

        assert result.source is MetricsSource.METRICS_SERVER
        assert result.node_count == 2
        assert result.ready_nodes == 2
        assert result.used_cpu == "430m"
        assert result.total_cpu == "4.0"
        assert result.used_memory == "3.9Gi"
        assert result.total_memory == "8.0Gi"
        assert result.cpu_percent == pytest.approx(10.75)
        assert result.memory_percent == pytest.approx(3947 / 8192 * 100)
        assert result.timestamp.tzinfo is not None

    @pytest.mark.asyncio
    async def test_cluster_metrics_without_allocatable(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        """Unknown totals give zero percentages instead of dividing by zero."""
        data_source.run_json.side_effect = KubectlCommandError(
            ("get", "nodes"), "forbidden"
        )

        result = await controller.cluster_metrics()

        assert result.total_cpu == "0m"
        assert result.total_memory == "0"
        assert result.cpu_percent == 0.0
        assert result.memory_percent == 0.0
        assert result.used_cpu == "430m"

    @pytest.mark.asyncio
    async def test_cluster_metrics_no_nodes(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run.return_value = ""

        result = await controller.cluster_metrics()

        assert result.node_count == 0
        assert result.nodes == []
        assert result.cpu_percent == 0.0

    # =========================================================================
    # Namespaces and pods
    # =========================================================================

    @pytest.mark.asyncio
    async def test_all_pod_metrics_default_namespace(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.return_value = "api   100m   256Mi\n"

        pods = await controller.all_pod_metrics()

        data_source.run_with_namespace.assert_awaited_once_with(
            "default", "top", "pods", "--no-headers"
        )
        assert pods[0].name == "api"
        assert pods[0].namespace == "default"

    @pytest.mark.asyncio
    async def test_all_pod_metrics_all_namespaces(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run.return_value = "kube-system   coredns-abc   3m   12Mi\n"

        pods = await controller.all_pod_metrics("ignored", all_namespaces=True)

        data_source.run.assert_awaited_once_with(
            "top", "pods", "--all-namespaces", "--no-headers"
        )
        data_source.run_with_namespace.assert_not_awaited()
        assert pods[0].namespace == "kube-system"
        assert pods[0].name == "coredns-abc"

    @pytest.mark.asyncio
    async def test_all_pod_metrics_fetch_failure(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = KubectlCommandError(
            ("top", "pods"), "boom"
        )

        with pytest.raises(MetricsFetchError, match="failed to get pod metrics"):
            await controller.all_pod_metrics("prod")

    @pytest.mark.asyncio
    async def test_namespace_metrics_totals(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.return_value = (
            "api      100m   256Mi\nworker   200m   512Mi\n"
        )

        result = await controller.namespace_metrics("prod")

        assert result.namespace == "prod"
        assert result.pod_count == 2
        assert result.total_cpu == "300m"
        assert result.total_memory == "768.0Mi"
        assert all(p.namespace == "prod" for p in result.pods)

    @pytest.mark.asyncio
    async def test_namespace_metrics_empty_name_uses_default(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        result = await controller.namespace_metrics("")

        assert result.namespace == "default"
        assert result.pod_count == 0
        assert result.total_cpu == "0m"

    @pytest.mark.asyncio
    async def test_pod_metrics_full(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = _namespaced_outputs()

        pod = await controller.pod_metrics("my-pod")

        assert pod.name == "my-pod"
        assert pod.namespace == "default"
        assert pod.cpu_usage == "250m"
        assert [c.name for c in pod.containers] == ["app", "sidecar"]
        # Container entries from a pod query carry usage only
        assert pod.containers[0].cpu_limit == ""
        assert pod.cpu_request == "100m"
        assert pod.cpu_limit == "500m"
        assert pod.memory_request == "128Mi"
        assert pod.memory_limit == "256Mi"
        data_source.get_json.assert_awaited_once_with("pod", "my-pod", "default")

    @pytest.mark.asyncio
    async def test_pod_metrics_not_found(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.return_value = ""

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await controller.pod_metrics("ghost", "prod")

        assert str(exc_info.value) == "pod ghost not found in namespace prod"
        data_source.get_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pod_metrics_enrichment_failures_absorbed(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        def _run(namespace: str, *args: str) -> str:
            if "--containers" in args:
                raise KubectlCommandError(args, "container metrics unavailable")
            return POD_TOP_OUTPUT

        data_source.run_with_namespace.side_effect = _run
        data_source.get_json.side_effect = KubectlCommandError(
            ("get", "pod"), "forbidden"
        )

        pod = await controller.pod_metrics("my-pod", "default")

        assert pod.cpu_usage == "250m"
        assert pod.containers == []
        assert pod.cpu_limit == ""

    @pytest.mark.asyncio
    async def test_pod_metrics_cancelled_in_specs_fetch(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = _namespaced_outputs()
        data_source.get_json.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await controller.pod_metrics("my-pod")

    # =========================================================================
    # Containers
    # =========================================================================

    @pytest.mark.asyncio
    async def test_container_metrics_with_specs(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = _namespaced_outputs()

        containers = await controller.container_metrics("my-pod", "default")

        data_source.run_with_namespace.assert_awaited_once_with(
            "default", "top", "pod", "my-pod", "--containers", "--no-headers"
        )
        data_source.get_json.assert_awaited_once_with("pod", "my-pod", "default")
        app, sidecar = containers
        assert app.cpu_limit == "500m"
        assert app.memory_request == "128Mi"
        assert app.cpu_percent == pytest.approx(50.0)
        assert app.memory_percent == pytest.approx(50.0)
        assert sidecar.cpu_limit == "200m"
        assert sidecar.memory_limit == "64Mi"
        assert sidecar.cpu_percent == pytest.approx(50.0)
        assert sidecar.memory_percent == pytest.approx(50.0)

    @pytest.mark.asyncio
    async def test_container_metrics_without_specs(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = _namespaced_outputs()

        containers = await controller.container_metrics("my-pod", with_specs=False)

        assert len(containers) == 2
        assert containers[0].cpu_percent is None
        data_source.get_json.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_container_metrics_specs_failure_absorbed(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = _namespaced_outputs()
        data_source.get_json = AsyncMock(side_effect=RuntimeError("api down"))

        containers = await controller.container_metrics("my-pod")

        assert [c.cpu_usage for c in containers] == ["250m", "100m"]
        assert containers[0].cpu_limit == ""
        assert containers[0].memory_percent is None

    @pytest.mark.asyncio
    async def test_container_metrics_fetch_failure(
        self, controller: TelemetryController, data_source: MagicMock
    ) -> None:
        data_source.run_with_namespace.side_effect = KubectlCommandError(
            ("top", "pod"), "pod not found"
        )

        with pytest.raises(MetricsFetchError, match="failed to get container metrics"):
            await controller.container_metrics("my-pod")

    @pytest.mark.asyncio
    async def test_configured_default_namespace(self, data_source: MagicMock) -> None:
        controller = TelemetryController(data_source, default_namespace="payments")

        result = await controller.namespace_metrics("")

        assert result.namespace == "payments"
        data_source.run_with_namespace.assert_awaited_once_with(
            "payments", "top", "pods", "--no-headers"
        )
