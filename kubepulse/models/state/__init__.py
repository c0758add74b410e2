"""Settings state models."""

from kubepulse.models.state.settings import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    TelemetrySettings,
)

__all__ = ["ConfigError", "ConfigLoadError", "ConfigManager", "TelemetrySettings"]
