"""Parsers for the telemetry controller."""

from kubepulse.controllers.telemetry.parsers.descriptor_parser import DescriptorParser
from kubepulse.controllers.telemetry.parsers.query_parser import QueryParser
from kubepulse.controllers.telemetry.parsers.top_parser import TopParser

__all__ = ["DescriptorParser", "QueryParser", "TopParser"]
