"""Utility functions for kubepulse."""

from kubepulse.utils.resource_parser import (
    cpu_to_millicores,
    format_bytes,
    format_millicores,
    memory_to_bytes,
    parse_percent,
)

__all__ = [
    # Resource quantities
    "cpu_to_millicores",
    "format_bytes",
    "format_millicores",
    "memory_to_bytes",
    "parse_percent",
]
