"""Kubectl fetcher for telemetry controller - runs kubectl for cluster data."""

from __future__ import annotations

import asyncio
import logging
import subprocess

from kubepulse.controllers.base.errors import KubectlCommandError
from kubepulse.models.state.settings import TelemetrySettings

logger = logging.getLogger(__name__)


class KubectlDataSource:
    """ClusterDataSource backed by the kubectl binary.

    Each command runs in a worker thread, so cancelling the awaiting task
    abandons the call instead of blocking the event loop.
    """

    def __init__(self, settings: TelemetrySettings | None = None) -> None:
        """Initialize with settings.

        Args:
            settings: kubectl binary, context and timeouts to use
        """
        self.settings = settings or TelemetrySettings()

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self.settings.kubectl_binary]
        if self.settings.context:
            cmd.extend(["--context", self.settings.context])
        cmd.extend(args)
        cmd.append(f"--request-timeout={self.settings.request_timeout}")
        return cmd

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.settings.command_timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise KubectlCommandError(
                args, f"timed out after {self.settings.command_timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise KubectlCommandError(args, str(exc)) from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlCommandError(args, stderr)
        return result.stdout

    async def run(self, *args: str) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def run_with_namespace(self, namespace: str, *args: str) -> str:
        return await self.run("-n", namespace, *args)

    async def run_json(self, *args: str) -> bytes:
        output = await self.run(*args, "-o", "json")
        return output.encode("utf-8")

    async def get_json(self, resource_type: str, name: str, namespace: str) -> bytes:
        args: list[str] = ["get", resource_type, name]
        if namespace:
            args.extend(["-n", namespace])
        return await self.run_json(*args)
