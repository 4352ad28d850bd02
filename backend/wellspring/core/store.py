"""In-Memory Store — per-entity tables with monotonic ids, seeded at construction.

Invariants:
    - Ids start at 1 per entity type, strictly increase, and are never reused
    - A create assigns the id and appends the record in one synchronous step
    - Nothing is deleted; list operations return records in insertion order
    - update_health_content raises ResourceNotFoundError for unknown ids and
      always moves updated_at strictly forward

Design Decisions:
    - EntityTable keeps a list indexed by id - 1: ids are dense because rows
      are never removed, so lookup is O(1) without a dict
    - Explicit MemoryStore instance injected into the app (no module-level
      singleton) so every test gets isolated state
    - Clock injected for deterministic timestamp tests
    - No locking: all mutations run on the event loop with no await between
      reading the counter and appending the row
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from typing import Generic, TypeVar

from wellspring.core.domain_types import (
    AdminId, ContentStatus, DonationId, EntityKind, HealthContentId,
    PartnerId, ResourceId, VolunteerId,
)
from wellspring.core.errors import ResourceNotFoundError
from wellspring.core.seed_data import SEED_PARTNERS, SEED_RESOURCES
from wellspring.models import (
    Admin, Donation, HealthContent, Partner, Resource, Volunteer,
)
from wellspring.schemas.content import (
    HealthContentCreate, PartnerCreate, ResourceCreate,
)
from wellspring.schemas.donation import DonationCreate
from wellspring.schemas.volunteer import VolunteerCreate

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Smallest step that survives a JSON isoformat round-trip
_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EntityTable(Generic[T]):
    """Growable row list plus a monotonic id counter for one entity type."""

    def __init__(self, kind: EntityKind):
        self.kind = kind
        self._rows: list[T] = []
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        """Build a row with the next id and append it."""
        row_id = self._next_id
        row = build(row_id)
        self._rows.append(row)
        self._next_id += 1
        logger.info(
            f"Created {self.kind.value} {row_id}",
            extra={"entity": self.kind.value, "entity_id": row_id},
        )
        return row

    def get(self, row_id: int) -> T | None:
        if 1 <= row_id <= len(self._rows):
            return self._rows[row_id - 1]
        return None

    def replace(self, row_id: int, row: T) -> None:
        self._rows[row_id - 1] = row

    def all(self) -> list[T]:
        return list(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._rows))


class MemoryStore:
    """All domain records for one process lifetime."""

    def __init__(
        self, clock: Callable[[], datetime] = utc_now, seed: bool = True,
    ):
        self._clock = clock
        self.admins: EntityTable[Admin] = EntityTable(EntityKind.ADMIN)
        self.volunteers: EntityTable[Volunteer] = EntityTable(EntityKind.VOLUNTEER)
        self.donations: EntityTable[Donation] = EntityTable(EntityKind.DONATION)
        self.partners: EntityTable[Partner] = EntityTable(EntityKind.PARTNER)
        self.resources: EntityTable[Resource] = EntityTable(EntityKind.RESOURCE)
        self.health_content: EntityTable[HealthContent] = EntityTable(
            EntityKind.HEALTH_CONTENT,
        )
        if seed:
            self._seed()

    def _seed(self) -> None:
        for resource in SEED_RESOURCES:
            self.create_resource(resource)
        for partner in SEED_PARTNERS:
            self.create_partner(partner)

    # ─── Admins ──────────────────────────────────────────────────

    def get_admins(self) -> list[Admin]:
        return self.admins.all()

    def create_admin(self, username: str, password_hash: str) -> Admin:
        return self.admins.insert(lambda i: Admin(
            id=AdminId(i), username=username,
            password_hash=password_hash, created_at=self._clock(),
        ))

    def find_admin_by_username(self, username: str) -> Admin | None:
        """Linear scan — first admin registered under this username."""
        return next((a for a in self.admins if a.username == username), None)

    # ─── Volunteers ──────────────────────────────────────────────

    def get_volunteers(self) -> list[Volunteer]:
        return self.volunteers.all()

    def create_volunteer(self, payload: VolunteerCreate) -> Volunteer:
        return self.volunteers.insert(
            lambda i: Volunteer(id=VolunteerId(i), **payload.model_dump()),
        )

    # ─── Donations ───────────────────────────────────────────────

    def get_donations(self) -> list[Donation]:
        return self.donations.all()

    def create_donation(self, payload: DonationCreate) -> Donation:
        return self.donations.insert(
            lambda i: Donation(id=DonationId(i), **payload.model_dump()),
        )

    # ─── Partners ────────────────────────────────────────────────

    def get_partners(self) -> list[Partner]:
        return self.partners.all()

    def create_partner(self, payload: PartnerCreate) -> Partner:
        return self.partners.insert(
            lambda i: Partner(id=PartnerId(i), **payload.model_dump()),
        )

    # ─── Resources ───────────────────────────────────────────────

    def get_resources(self) -> list[Resource]:
        return self.resources.all()

    def get_resources_by_category(self, category: str) -> list[Resource]:
        return [r for r in self.resources if r.category == category]

    def create_resource(self, payload: ResourceCreate) -> Resource:
        return self.resources.insert(
            lambda i: Resource(id=ResourceId(i), **payload.model_dump()),
        )

    # ─── Health Content ──────────────────────────────────────────

    def get_health_content(self) -> list[HealthContent]:
        return self.health_content.all()

    def get_health_content_by_id(self, content_id: int) -> HealthContent | None:
        return self.health_content.get(content_id)

    def get_health_content_by_status(
        self, status: ContentStatus | str,
    ) -> list[HealthContent]:
        wanted = status.value if isinstance(status, ContentStatus) else status
        return [c for c in self.health_content if c.status.value == wanted]

    def create_health_content(
        self, payload: HealthContentCreate,
    ) -> HealthContent:
        now = self._clock()
        fields = payload.model_dump()
        fields["tags"] = payload.tags or []
        return self.health_content.insert(lambda i: HealthContent(
            id=HealthContentId(i), created_at=now, updated_at=now, **fields,
        ))

    def update_health_content(
        self, content_id: int, changes: dict,
    ) -> HealthContent:
        """Merge changes onto the stored article and refresh updated_at."""
        existing = self.health_content.get(content_id)
        if existing is None:
            raise ResourceNotFoundError(
                "Content not found", EntityKind.HEALTH_CONTENT.value, content_id,
            )
        updated_at = max(self._clock(), existing.updated_at + _TICK)
        updated = HealthContent.model_validate(
            {**existing.model_dump(), **changes, "updated_at": updated_at},
        )
        self.health_content.replace(content_id, updated)
        logger.info(
            f"Updated health_content {content_id}",
            extra={
                "entity": EntityKind.HEALTH_CONTENT.value,
                "entity_id": content_id,
            },
        )
        return updated
