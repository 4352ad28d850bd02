"""Partner record — partner organizations shown on the public site."""

from wellspring.core.domain_types import PartnerId
from wellspring.models.base import RecordModel


class Partner(RecordModel):
    id: PartnerId
    name: str
    description: str
    website: str
    logo: str
    type: str
