"""Exceptions raised by telemetry controllers and data sources."""

from __future__ import annotations

from typing import Any


class TelemetryError(Exception):
    """Base exception for telemetry operations."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class KubectlCommandError(TelemetryError):
    """Raised when a kubectl invocation fails or times out."""

    def __init__(self, args: tuple[str, ...], stderr: str) -> None:
        self.command_args = args
        self.stderr = stderr
        super().__init__(stderr or "kubectl command failed", {"args": list(args)})


class MetricsFetchError(TelemetryError):
    """Raised when the primary fetch behind a metrics operation fails."""


class ResourceNotFoundError(TelemetryError):
    """Raised when a named pod, node or container is absent from the results."""

    def __init__(self, kind: str, name: str, namespace: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.namespace = namespace
        location = f" in namespace {namespace}" if namespace else ""
        super().__init__(
            f"{kind} {name} not found{location}",
            {"kind": kind, "name": name, "namespace": namespace},
        )
