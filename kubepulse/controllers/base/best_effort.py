"""Fail-open wrapper for enrichment fetches.

Enrichment (node allocatable, pod requests/limits, container detail) must
never fail the primary result. Every enrichment call site goes through
``best_effort`` so the policy lives in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def best_effort(description: str, awaitable: Awaitable[T], fallback: T) -> T:
    """Await ``awaitable``; on failure log it and return ``fallback``.

    Only ``Exception`` is absorbed. ``asyncio.CancelledError`` derives from
    ``BaseException`` and propagates.
    """
    try:
        return await awaitable
    except Exception as exc:
        logger.warning("Could not %s: %s", description, exc)
        return fallback
