"""Content Schemas — resources, partners and health content payloads.

Invariants:
    - HealthContentUpdate accepts any subset of HealthContentCreate fields
    - Explicit null is rejected for fields that are required on create
    - Only fields present in the request are merged (exclude_unset)

Design Decisions:
    - Update schema mirrors Create with every field optional rather than
      deriving it dynamically: explicit fields read better in OpenAPI docs
"""

from pydantic import BaseModel, field_validator

from wellspring.core.domain_types import ContentStatus


class ResourceCreate(BaseModel):
    title: str
    description: str
    category: str
    content: str
    tags: list[str] = []


class PartnerCreate(BaseModel):
    name: str
    description: str
    website: str
    logo: str
    type: str


class HealthContentCreate(BaseModel):
    """Article creation — tags omitted or null become [] in the store."""
    title: str
    summary: str | None = None
    content: str
    category: str
    author: str | None = None
    status: ContentStatus = ContentStatus.DRAFT
    tags: list[str] | None = None


class HealthContentUpdate(BaseModel):
    """Partial update — every field optional."""
    title: str | None = None
    summary: str | None = None
    content: str | None = None
    category: str | None = None
    author: str | None = None
    status: ContentStatus | None = None
    tags: list[str] | None = None

    @field_validator("title", "content", "category", "status", "tags")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    def changes(self) -> dict:
        """Fields explicitly sent by the client."""
        return self.model_dump(exclude_unset=True)
