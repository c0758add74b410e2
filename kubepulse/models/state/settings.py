"""Telemetry settings model and loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from kubepulse.constants.defaults import DEFAULT_NAMESPACE, KUBECTL_BINARY_DEFAULT
from kubepulse.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)

logger = logging.getLogger(__name__)

ENV_CONTEXT = "KUBEPULSE_CONTEXT"
ENV_NAMESPACE = "KUBEPULSE_NAMESPACE"


class TelemetrySettings(BaseModel):
    """Settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # kubectl invocation
    kubectl_binary: str = KUBECTL_BINARY_DEFAULT
    context: str | None = None
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout_seconds: int = KUBECTL_COMMAND_TIMEOUT

    # Query defaults
    default_namespace: str = DEFAULT_NAMESPACE


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigManager:
    """Loads TelemetrySettings from a YAML file plus environment overrides."""

    DEFAULT_PATH = Path("~/.config/kubepulse/settings.yaml")

    @classmethod
    def load(cls, path: str | Path | None = None) -> TelemetrySettings:
        """Load settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: The file exists but is not a valid settings mapping.
        """
        settings_path = Path(path or cls.DEFAULT_PATH).expanduser()
        raw: dict = {}
        if settings_path.is_file():
            try:
                loaded = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc
            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigLoadError(f"{settings_path} must contain a mapping")
            raw = loaded
        else:
            logger.debug("No settings file at %s, using defaults", settings_path)

        if os.environ.get(ENV_CONTEXT):
            raw["context"] = os.environ[ENV_CONTEXT]
        if os.environ.get(ENV_NAMESPACE):
            raw["default_namespace"] = os.environ[ENV_NAMESPACE]

        try:
            return TelemetrySettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc
