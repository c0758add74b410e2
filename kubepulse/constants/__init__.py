"""Constants module for kubepulse.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- defaults.py: Default values for settings and parsing
- timeouts.py: Timeout values
"""

from kubepulse.constants.defaults import (
    DEFAULT_NAMESPACE,
    KUBECTL_BINARY_DEFAULT,
    RESOURCE_SPEC_WINDOW,
    UNKNOWN_QUANTITY,
)
from kubepulse.constants.enums import (
    MetricsScope,
    MetricsSource,
    ResponseType,
    SortKey,
)
from kubepulse.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

__all__ = [
    # Defaults
    "DEFAULT_NAMESPACE",
    "KUBECTL_BINARY_DEFAULT",
    "RESOURCE_SPEC_WINDOW",
    "UNKNOWN_QUANTITY",
    # Enums
    "MetricsScope",
    "MetricsSource",
    "ResponseType",
    "SortKey",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
]
