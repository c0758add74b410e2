"""Resource quantity conversion for CPU and memory values.

Converts Kubernetes resource strings to canonical integers and back:
- CPU: millicores (int)
- Memory: bytes (int)

Unparseable input converts to zero instead of raising. Callers rely on
that to keep one odd row from failing a whole query.
"""

import math

from kubepulse.constants.defaults import UNKNOWN_QUANTITY

# Module-level constants to avoid re-creating on every function call.
# Suffix multipliers for memory_to_bytes(); the suffixes never overlap.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
)

# Largest unit first for bytes formatting
_BINARY_UNITS: tuple[tuple[str, int], ...] = (
    ("Ti", 1024**4),
    ("Gi", 1024**3),
    ("Mi", 1024**2),
    ("Ki", 1024),
)


def _is_blank(value: str | None) -> bool:
    return not value or value == UNKNOWN_QUANTITY


def cpu_to_millicores(cpu_str: str) -> int:
    """Parse a CPU string to millicores.

    Handles the formats kubectl prints:
    - Millicores: "250m" -> 250
    - Cores: "1" -> 1000, "1.5" -> 1500 (truncated, not rounded)

    Args:
        cpu_str: CPU value as string

    Returns:
        CPU in millicores. Returns 0 for empty, "<unknown>" or malformed input.
    """
    if cpu_str is None:
        return 0
    cpu_str = str(cpu_str).strip()
    if _is_blank(cpu_str):
        return 0

    if cpu_str.endswith("m"):
        try:
            return int(cpu_str[:-1])
        except ValueError:
            return 0

    try:
        return int(float(cpu_str) * 1000)
    except (ValueError, OverflowError):
        return 0


def memory_to_bytes(memory_str: str) -> int:
    """Convert a memory string to bytes.

    Binary suffixes (Ki, Mi, Gi, Ti) scale by powers of 1024, decimal
    suffixes (K, M, G, T) by powers of 1000. A bare number is a byte count.
    The numeric prefix must be an integer.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1000M")

    Returns:
        Memory in bytes. Returns 0 for empty, "<unknown>" or malformed input.
    """
    if memory_str is None:
        return 0
    memory_str = str(memory_str).strip()
    if _is_blank(memory_str):
        return 0

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return int(memory_str[: -len(suffix)]) * mult
            except ValueError:
                return 0

    try:
        return int(memory_str)
    except ValueError:
        return 0


def format_millicores(millicores: int) -> str:
    """Format millicores for display: "250m" below one core, "1.5" above."""
    if millicores >= 1000:
        return f"{millicores / 1000:.1f}"
    return f"{millicores}m"


def format_bytes(num_bytes: int) -> str:
    """Format bytes using the largest binary unit that fits, e.g. "1.5Gi"."""
    for suffix, size in _BINARY_UNITS:
        if num_bytes >= size:
            return f"{num_bytes / size:.1f}{suffix}"
    return str(num_bytes)


def parse_percent(percent_str: str) -> float:
    """Parse a kubectl percentage column such as "27%". Returns 0.0 on error."""
    if not percent_str:
        return 0.0
    try:
        value = float(str(percent_str).strip().removesuffix("%"))
    except ValueError:
        return 0.0
    # NaN would break the ordering used for sorting
    if math.isnan(value):
        return 0.0
    return value
