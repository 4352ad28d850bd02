"""Record Models — immutable pydantic records held by the in-memory store.

Invariants:
    - Records are frozen; updates replace the stored record, never mutate it
    - Wire names are camelCase (passwordHash, createdAt), attributes snake_case

Design Decisions:
    - One file per entity for locality
    - All records re-exported here so routes import from a single place
"""

from wellspring.models.admin import Admin  # noqa: F401
from wellspring.models.volunteer import Volunteer  # noqa: F401
from wellspring.models.donation import Donation  # noqa: F401
from wellspring.models.partner import Partner  # noqa: F401
from wellspring.models.resource import Resource  # noqa: F401
from wellspring.models.health_content import HealthContent  # noqa: F401
