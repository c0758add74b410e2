"""Query models."""

from kubepulse.models.query.query_intent import QueryIntent, QueryOptions
from kubepulse.models.query.response import TelemetryResponse

__all__ = ["QueryIntent", "QueryOptions", "TelemetryResponse"]
