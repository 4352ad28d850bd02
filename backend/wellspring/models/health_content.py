"""HealthContent record — admin-managed articles.

Invariants:
    - created_at is set once; updated_at is refreshed on every mutation
    - tags is never None (store defaults it to [])
"""

from datetime import datetime

from wellspring.core.domain_types import ContentStatus, HealthContentId
from wellspring.models.base import RecordModel


class HealthContent(RecordModel):
    id: HealthContentId
    title: str
    summary: str | None = None
    content: str
    category: str
    author: str | None = None
    status: ContentStatus = ContentStatus.DRAFT
    tags: list[str]
    created_at: datetime
    updated_at: datetime
