"""Node usage models built from `kubectl top nodes` and node descriptors."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResourceUsage(BaseModel):
    """CPU and memory quantities as kubectl prints them."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    cpu: str = ""
    memory: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.cpu or self.memory)


class NodeMetrics(BaseModel):
    """Current usage of one node.

    Percentages are the ones metrics-server reports against allocatable,
    they are never recomputed here.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    name: str
    cpu_usage: str = ""
    cpu_percent: float = 0.0
    memory_usage: str = ""
    memory_percent: float = 0.0
    allocatable: ResourceUsage = Field(default_factory=ResourceUsage)
    capacity: ResourceUsage = Field(default_factory=ResourceUsage)
