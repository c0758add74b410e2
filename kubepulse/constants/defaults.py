"""Default values for kubepulse settings and parsing."""

from typing import Final

# ============================================================================
# Cluster defaults
# ============================================================================

DEFAULT_NAMESPACE: Final = "default"
KUBECTL_BINARY_DEFAULT: Final = "kubectl"

# Placeholder metrics-server prints for values it cannot compute yet
UNKNOWN_QUANTITY: Final = "<unknown>"

# ============================================================================
# Descriptor scanning
# ============================================================================

# Characters inspected after a "requests"/"limits" marker in a pod descriptor
RESOURCE_SPEC_WINDOW: Final = 200

__all__ = [
    "DEFAULT_NAMESPACE",
    "KUBECTL_BINARY_DEFAULT",
    "RESOURCE_SPEC_WINDOW",
    "UNKNOWN_QUANTITY",
]
