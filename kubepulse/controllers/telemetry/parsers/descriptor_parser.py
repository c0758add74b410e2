"""Descriptor parser for telemetry controller - scans kubectl JSON output.

Both scans work line by line or over a bounded character window instead of
decoding the document. They depend on the order kubectl prints keys in and
are best effort: reordered documents can misattribute values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from kubepulse.constants.defaults import RESOURCE_SPEC_WINDOW
from kubepulse.models.core.node_metrics import NodeMetrics, ResourceUsage
from kubepulse.models.core.pod_metrics import ResourceSpecs


class _ScanState(Enum):
    """Position of the allocatable/capacity scan."""

    SEEKING_NODE = auto()
    IN_ALLOCATABLE = auto()
    IN_CAPACITY = auto()


@dataclass
class _NodeScan:
    name: str = ""
    alloc_cpu: str = ""
    alloc_memory: str = ""
    cap_cpu: str = ""
    cap_memory: str = ""

    @property
    def has_allocatable(self) -> bool:
        return bool(self.name and self.alloc_cpu and self.alloc_memory)

    @property
    def has_capacity(self) -> bool:
        return bool(self.cap_cpu and self.cap_memory)

    def to_node(self) -> NodeMetrics:
        return NodeMetrics(
            name=self.name,
            allocatable=ResourceUsage(cpu=self.alloc_cpu, memory=self.alloc_memory),
            capacity=ResourceUsage(cpu=self.cap_cpu, memory=self.cap_memory),
        )


def _quoted_value(text: str) -> str:
    """Return the second quoted token of ``"key": "value"``, or ""."""
    parts = text.split('"')
    if len(parts) >= 4:
        return parts[3]
    return ""


def _decode(document: bytes | str) -> str:
    if isinstance(document, bytes):
        return document.decode("utf-8", errors="replace")
    return document


class DescriptorParser:
    """Extracts resource figures from node and pod JSON descriptors."""

    def parse_node_allocatable(self, document: bytes | str) -> dict[str, NodeMetrics]:
        """Scan `get nodes -o json` output for allocatable and capacity.

        Expects, per node, the name line, then the allocatable block, then
        the capacity block. A node is recorded once its allocatable cpu and
        memory are known and finalized once capacity is known too, after
        which the scan looks for the next node.

        Returns:
            Node name -> NodeMetrics carrying only allocatable/capacity.
        """
        nodes: dict[str, NodeMetrics] = {}
        state = _ScanState.SEEKING_NODE
        scan = _NodeScan()

        for raw_line in _decode(document).splitlines():
            line = raw_line.strip()
            if '"name":' in line and '"metadata"' not in line:
                name = _quoted_value(line)
                if name:
                    scan.name = name
            if '"allocatable"' in line:
                state = _ScanState.IN_ALLOCATABLE
            if '"capacity"' in line:
                state = _ScanState.IN_CAPACITY

            if state is _ScanState.IN_ALLOCATABLE:
                if '"cpu"' in line:
                    scan.alloc_cpu = _quoted_value(line) or scan.alloc_cpu
                if '"memory"' in line:
                    scan.alloc_memory = _quoted_value(line) or scan.alloc_memory
            elif state is _ScanState.IN_CAPACITY:
                if '"cpu"' in line:
                    scan.cap_cpu = _quoted_value(line) or scan.cap_cpu
                if '"memory"' in line:
                    scan.cap_memory = _quoted_value(line) or scan.cap_memory

            if scan.has_allocatable:
                nodes[scan.name] = scan.to_node()
                if scan.has_capacity:
                    scan = _NodeScan()
                    state = _ScanState.SEEKING_NODE

        return nodes

    def parse_resource_specs(
        self, document: bytes | str, container: str | None = None
    ) -> ResourceSpecs:
        """Scrape requests and limits from a `get pod -o json` descriptor.

        Looks at a fixed window after the first "requests" and the first
        "limits" marker and takes the first cpu and memory values inside it.
        With ``container`` the scan starts at that container's name inside the
        "containers" list and stops at the next "image" key, which opens the
        following container.
        """
        content = _decode(document)
        if container:
            # Only entries under spec.containers, not metadata or ownerReferences
            start = content.find('"containers"')
            if start == -1:
                return ResourceSpecs()
            pattern = re.compile(r'"name":\s*"' + re.escape(container) + '"')
            match = pattern.search(content, start)
            if match is None:
                return ResourceSpecs()
            end = content.find('"image":', match.end())
            content = content[match.start() : end if end != -1 else len(content)]

        cpu_request, memory_request = self._scan_section(content, '"requests"')
        cpu_limit, memory_limit = self._scan_section(content, '"limits"')
        return ResourceSpecs(
            cpu_request=cpu_request,
            cpu_limit=cpu_limit,
            memory_request=memory_request,
            memory_limit=memory_limit,
        )

    @staticmethod
    def _scan_section(content: str, marker: str) -> tuple[str, str]:
        idx = content.find(marker)
        if idx == -1:
            return "", ""
        section = content[idx : idx + RESOURCE_SPEC_WINDOW]
        values = []
        for key in ('"cpu"', '"memory"'):
            key_idx = section.find(key)
            values.append(_quoted_value(section[key_idx:]) if key_idx != -1 else "")
        return values[0], values[1]
