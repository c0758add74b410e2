"""Query intent and caller options for telemetry queries."""

from __future__ import annotations

from dataclasses import dataclass

from kubepulse.constants.enums import MetricsScope, SortKey


@dataclass
class QueryIntent:
    """What the query classifier inferred from free text.

    Empty strings mean "unset" and are filled from caller options.
    """

    scope: MetricsScope = MetricsScope.CLUSTER
    target: str = ""
    namespace: str = ""
    sort_by: SortKey = SortKey.NONE
    # Pod named alongside a container-scope target
    pod_name: str = ""


@dataclass
class QueryOptions:
    """Explicit caller options. Anything set here wins over the intent."""

    scope: MetricsScope | None = None
    namespace: str = ""
    all_namespaces: bool = False
    pod_name: str = ""
    container_name: str = ""
    node_name: str = ""
    sort_by: SortKey = SortKey.NONE
