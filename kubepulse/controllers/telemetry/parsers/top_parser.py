"""Top parser for telemetry controller - parses `kubectl top` tables."""

from __future__ import annotations

from kubepulse.constants.defaults import DEFAULT_NAMESPACE
from kubepulse.models.core.node_metrics import NodeMetrics
from kubepulse.models.core.pod_metrics import ContainerMetrics, PodMetrics
from kubepulse.utils.resource_parser import parse_percent


class TopParser:
    """Parses whitespace-delimited `kubectl top` output into models.

    Input is expected without a header row (`--no-headers`). Rows that fit
    none of the known layouts are dropped without being reported.
    """

    # Suffixes that mark field[1] of a pod row as a quantity, not a pod name
    _QUANTITY_SUFFIXES = ("m", "Mi", "Gi")

    @staticmethod
    def _rows(output: str) -> list[list[str]]:
        rows = []
        for line in output.strip().splitlines():
            fields = line.split()
            if fields:
                rows.append(fields)
        return rows

    def parse_nodes(self, output: str) -> list[NodeMetrics]:
        """Parse `top nodes` rows: NAME CPU(cores) CPU% MEMORY(bytes) MEMORY%."""
        nodes: list[NodeMetrics] = []
        for fields in self._rows(output):
            if len(fields) < 5:
                continue
            nodes.append(
                NodeMetrics(
                    name=fields[0],
                    cpu_usage=fields[1],
                    cpu_percent=parse_percent(fields[2]),
                    memory_usage=fields[3],
                    memory_percent=parse_percent(fields[4]),
                )
            )
        return nodes

    def parse_pods(
        self, output: str, default_namespace: str = DEFAULT_NAMESPACE
    ) -> list[PodMetrics]:
        """Parse `top pods` rows in either layout.

        With `--all-namespaces` rows read NAMESPACE NAME CPU MEMORY, otherwise
        NAME CPU MEMORY and ``default_namespace`` applies. A row is taken as
        the all-namespaces layout when it has four fields and the second one
        does not look like a quantity.
        """
        pods: list[PodMetrics] = []
        for fields in self._rows(output):
            if len(fields) >= 4 and not fields[1].endswith(self._QUANTITY_SUFFIXES):
                pods.append(
                    PodMetrics(
                        namespace=fields[0],
                        name=fields[1],
                        cpu_usage=fields[2],
                        memory_usage=fields[3],
                    )
                )
            elif len(fields) >= 3:
                pods.append(
                    PodMetrics(
                        namespace=default_namespace,
                        name=fields[0],
                        cpu_usage=fields[1],
                        memory_usage=fields[2],
                    )
                )
        return pods

    def parse_containers(self, output: str) -> list[ContainerMetrics]:
        """Parse `top pod --containers` rows.

        NAMESPACE POD CONTAINER CPU MEMORY or POD CONTAINER CPU MEMORY.
        """
        containers: list[ContainerMetrics] = []
        for fields in self._rows(output):
            if len(fields) >= 5:
                name, cpu, memory = fields[2], fields[3], fields[4]
            elif len(fields) >= 4:
                name, cpu, memory = fields[1], fields[2], fields[3]
            else:
                continue
            containers.append(
                ContainerMetrics(name=name, cpu_usage=cpu, memory_usage=memory)
            )
        return containers
