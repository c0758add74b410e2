"""Query parser for telemetry controller - classifies free-text queries.

This is a keyword heuristic, not language understanding. Every table below
is evaluated in order and the first hit wins.
"""

from __future__ import annotations

import logging

from kubepulse.constants.enums import MetricsScope, SortKey
from kubepulse.models.query.query_intent import QueryIntent

logger = logging.getLogger(__name__)

# Precedence matters: "containers of pod x" is a container query.
_SCOPE_KEYWORDS: tuple[tuple[tuple[str, ...], MetricsScope], ...] = (
    (("node", "nodes"), MetricsScope.NODE),
    (("container", "containers"), MetricsScope.CONTAINER),
    (("pod", "pods"), MetricsScope.POD),
    (("namespace",), MetricsScope.NAMESPACE),
)

_NAMESPACE_MARKERS = ("namespace ", "ns ", "-n ", "in namespace ", "in ns ")

_TARGET_MARKERS: dict[MetricsScope, tuple[str, ...]] = {
    MetricsScope.NODE: ("node ", "for node "),
    MetricsScope.POD: ("pod ", "for pod "),
    MetricsScope.CONTAINER: ("container ", "for container "),
}

_SUPERLATIVES = ("most", "top", "highest")

_SORT_KEYWORDS: tuple[tuple[str, SortKey], ...] = (
    ("cpu", SortKey.CPU),
    ("memory", SortKey.MEMORY),
)


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def word_after_marker(text: str, markers: tuple[str, ...]) -> str:
    """Return the first word after the first marker of ``markers`` found.

    Markers are tried in list order, not by position in ``text``.
    """
    for marker in markers:
        idx = text.find(marker)
        if idx == -1:
            continue
        words = text[idx + len(marker) :].split()
        if words:
            return words[0]
    return ""


class QueryParser:
    """Turns an operator query into a QueryIntent."""

    def analyze(self, query: str) -> QueryIntent:
        q = query.lower()
        scope = self.detect_scope(q)
        intent = QueryIntent(
            scope=scope,
            target=self.extract_target(q, scope),
            namespace=self.extract_namespace(q),
            sort_by=self.detect_sort(q),
        )
        if scope is MetricsScope.CONTAINER:
            intent.pod_name = self.extract_target(q, MetricsScope.POD)

        logger.debug(
            "Analyzed query %r: scope=%s target=%s namespace=%s sort=%s",
            query,
            intent.scope.value,
            intent.target,
            intent.namespace,
            intent.sort_by.value,
        )
        return intent

    @staticmethod
    def detect_scope(query: str) -> MetricsScope:
        for keywords, scope in _SCOPE_KEYWORDS:
            if contains_any(query, keywords):
                return scope
        return MetricsScope.CLUSTER

    @staticmethod
    def extract_namespace(query: str) -> str:
        return word_after_marker(query, _NAMESPACE_MARKERS)

    @staticmethod
    def extract_target(query: str, scope: MetricsScope) -> str:
        """Extract the resource name for node, pod and container scopes."""
        markers = _TARGET_MARKERS.get(scope)
        if not markers:
            return ""
        name = word_after_marker(query, markers)
        return name.removesuffix(",").removesuffix("?")

    @staticmethod
    def detect_sort(query: str) -> SortKey:
        if not contains_any(query, _SUPERLATIVES):
            return SortKey.NONE
        for keyword, sort_key in _SORT_KEYWORDS:
            if keyword in query:
                return sort_key
        return SortKey.NONE
