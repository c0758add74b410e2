"""Response envelope returned for every telemetry query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from kubepulse.constants.enums import ResponseType


@dataclass
class TelemetryResponse:
    """Result wrapper for telemetry queries.

    ``data`` holds the scope-typed payload on success. On failure ``error``
    keeps the originating exception, which may be None for lookups that
    simply found nothing to filter on.
    """

    type: ResponseType
    data: Any | None = None
    message: str = ""
    error: Exception | None = None

    @classmethod
    def result(cls, data: Any, message: str) -> TelemetryResponse:
        return cls(type=ResponseType.RESULT, data=data, message=message)

    @classmethod
    def failure(cls, message: str, error: Exception | None = None) -> TelemetryResponse:
        return cls(type=ResponseType.ERROR, message=message, error=error)

    @property
    def is_error(self) -> bool:
        return self.type is ResponseType.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary with camelCase payload keys."""
        return {
            "type": self.type.value,
            "data": _dump_payload(self.data),
            "message": self.message,
            "error": str(self.error) if self.error else None,
        }


def _dump_payload(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json")
    if isinstance(data, list):
        return [_dump_payload(item) for item in data]
    return data
