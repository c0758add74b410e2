"""Controllers module for kubepulse.

This module provides the telemetry controller and router that turn
kubectl output into usage metrics.
"""

from __future__ import annotations

# Base classes
from kubepulse.controllers.base import (
    BaseController,
    ClusterDataSource,
    KubectlCommandError,
    MetricsFetchError,
    ResourceNotFoundError,
    TelemetryError,
)

# Telemetry domain
from kubepulse.controllers.telemetry import (
    KubectlDataSource,
    TelemetryController,
    TelemetryRouter,
)

__all__ = [
    # Base
    "BaseController",
    "ClusterDataSource",
    "KubectlCommandError",
    "MetricsFetchError",
    "ResourceNotFoundError",
    "TelemetryError",
    # Telemetry domain
    "KubectlDataSource",
    "TelemetryController",
    "TelemetryRouter",
]
