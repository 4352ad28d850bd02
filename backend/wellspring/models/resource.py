"""Resource record — self-help material grouped by category."""

from wellspring.core.domain_types import ResourceId
from wellspring.models.base import RecordModel


class Resource(RecordModel):
    id: ResourceId
    title: str
    description: str
    category: str
    content: str
    tags: list[str]
