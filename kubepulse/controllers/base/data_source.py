"""Cluster data source capability consumed by the telemetry controller."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClusterDataSource(Protocol):
    """Async kubectl-like access to the cluster.

    Implementations raise on transport or command failure and must let
    ``asyncio.CancelledError`` through so callers can abort a query.
    """

    async def run(self, *args: str) -> str:
        """Run a query and return its tabular text output."""
        ...

    async def run_with_namespace(self, namespace: str, *args: str) -> str:
        """Run a namespace-scoped query and return its tabular text output."""
        ...

    async def run_json(self, *args: str) -> bytes:
        """Run a listing query and return the JSON document."""
        ...

    async def get_json(self, resource_type: str, name: str, namespace: str) -> bytes:
        """Fetch one resource's full JSON descriptor."""
        ...
