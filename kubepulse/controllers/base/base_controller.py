"""Base controller for data sources queried through kubectl."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kubepulse.controllers.base.data_source import ClusterDataSource


class BaseController(ABC):
    """Base controller class holding the cluster data source.

    Subclasses implement the availability probe for their data.
    """

    def __init__(self, data_source: ClusterDataSource) -> None:
        self._data_source = data_source

    @property
    def data_source(self) -> ClusterDataSource:
        return self._data_source

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...
