"""kubepulse - resource-usage telemetry for Kubernetes clusters."""

from kubepulse.controllers import (
    KubectlDataSource,
    TelemetryController,
    TelemetryRouter,
)
from kubepulse.models.query import QueryOptions, TelemetryResponse

__all__ = [
    "KubectlDataSource",
    "QueryOptions",
    "TelemetryController",
    "TelemetryResponse",
    "TelemetryRouter",
]

__version__ = "0.1.0"
