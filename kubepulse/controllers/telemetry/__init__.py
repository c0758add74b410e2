"""Telemetry domain: usage metrics and query routing."""

from kubepulse.controllers.telemetry.controller import TelemetryController
from kubepulse.controllers.telemetry.fetchers import KubectlDataSource
from kubepulse.controllers.telemetry.parsers import (
    DescriptorParser,
    QueryParser,
    TopParser,
)
from kubepulse.controllers.telemetry.router import TelemetryRouter

__all__ = [
    "DescriptorParser",
    "KubectlDataSource",
    "QueryParser",
    "TelemetryController",
    "TelemetryRouter",
    "TopParser",
]
