"""Fetchers for the telemetry controller."""

from kubepulse.controllers.telemetry.fetchers.kubectl_fetcher import KubectlDataSource

__all__ = ["KubectlDataSource"]
