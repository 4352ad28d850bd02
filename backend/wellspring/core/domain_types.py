"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Every entity id wraps a positive int assigned by the store
    - Content status values encoded as an Enum, not raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AdminId = NewType("AdminId", int)
VolunteerId = NewType("VolunteerId", int)
DonationId = NewType("DonationId", int)
PartnerId = NewType("PartnerId", int)
ResourceId = NewType("ResourceId", int)
HealthContentId = NewType("HealthContentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ContentStatus(str, Enum):
    """Editorial states for health content articles."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class EntityKind(str, Enum):
    """Entity tables held by the store — used for counters and logging."""
    ADMIN = "admin"
    VOLUNTEER = "volunteer"
    DONATION = "donation"
    PARTNER = "partner"
    RESOURCE = "resource"
    HEALTH_CONTENT = "health_content"
