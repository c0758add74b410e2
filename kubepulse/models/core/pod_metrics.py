"""Pod and container usage models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kubepulse.constants.defaults import DEFAULT_NAMESPACE
from kubepulse.utils.resource_parser import cpu_to_millicores, memory_to_bytes


class ResourceSpecs(BaseModel):
    """Requests and limits scraped from a pod descriptor."""

    cpu_request: str = ""
    cpu_limit: str = ""
    memory_request: str = ""
    memory_limit: str = ""


class ContainerMetrics(BaseModel):
    """Current usage of one container, with optional requests/limits."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    name: str
    cpu_usage: str = ""
    memory_usage: str = ""
    cpu_request: str = ""
    cpu_limit: str = ""
    memory_request: str = ""
    memory_limit: str = ""
    # Percent of limit, only when a limit is known
    cpu_percent: float | None = None
    memory_percent: float | None = None

    def apply_resource_specs(self, specs: ResourceSpecs) -> None:
        """Copy requests/limits and derive the percent-of-limit fields."""
        self.cpu_request = specs.cpu_request
        self.cpu_limit = specs.cpu_limit
        self.memory_request = specs.memory_request
        self.memory_limit = specs.memory_limit

        cpu_limit = cpu_to_millicores(self.cpu_limit)
        if cpu_limit > 0:
            self.cpu_percent = cpu_to_millicores(self.cpu_usage) / cpu_limit * 100
        mem_limit = memory_to_bytes(self.memory_limit)
        if mem_limit > 0:
            self.memory_percent = memory_to_bytes(self.memory_usage) / mem_limit * 100


class PodMetrics(BaseModel):
    """Current usage of one pod."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    name: str
    namespace: str = DEFAULT_NAMESPACE
    cpu_usage: str = ""
    memory_usage: str = ""
    cpu_request: str = ""
    cpu_limit: str = ""
    memory_request: str = ""
    memory_limit: str = ""
    containers: list[ContainerMetrics] = Field(default_factory=list)

    def apply_resource_specs(self, specs: ResourceSpecs) -> None:
        """Copy scraped requests/limits onto the pod."""
        self.cpu_request = specs.cpu_request
        self.cpu_limit = specs.cpu_limit
        self.memory_request = specs.memory_request
        self.memory_limit = specs.memory_limit
