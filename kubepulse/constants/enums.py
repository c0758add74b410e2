"""All enum definitions for kubepulse.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Scope Enums
# =============================================================================

class MetricsScope(str, Enum):
    """Aggregation level a telemetry query targets."""

    CLUSTER = "cluster"
    NODE = "node"
    NAMESPACE = "namespace"
    POD = "pod"
    CONTAINER = "container"


class MetricsSource(str, Enum):
    """Where a metrics payload came from."""

    METRICS_SERVER = "metrics-server"


# =============================================================================
# Response Enums
# =============================================================================

class ResponseType(str, Enum):
    """Discriminator for the telemetry response envelope."""

    RESULT = "result"
    ERROR = "error"


# =============================================================================
# Sort Enums
# =============================================================================

class SortKey(str, Enum):
    """Usage dimension for top-N style results."""

    NONE = ""
    CPU = "cpu"
    MEMORY = "memory"


__all__ = [
    "MetricsScope",
    "MetricsSource",
    "ResponseType",
    "SortKey",
]
