"""Base controller building blocks."""

from kubepulse.controllers.base.base_controller import BaseController
from kubepulse.controllers.base.best_effort import best_effort
from kubepulse.controllers.base.data_source import ClusterDataSource
from kubepulse.controllers.base.errors import (
    KubectlCommandError,
    MetricsFetchError,
    ResourceNotFoundError,
    TelemetryError,
)

__all__ = [
    "BaseController",
    "ClusterDataSource",
    "KubectlCommandError",
    "MetricsFetchError",
    "ResourceNotFoundError",
    "TelemetryError",
    "best_effort",
]
