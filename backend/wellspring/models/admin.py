"""Admin record — created only through registration."""

from datetime import datetime

from wellspring.core.domain_types import AdminId
from wellspring.models.base import RecordModel


class Admin(RecordModel):
    """Administrator account. Username uniqueness is not enforced."""
    id: AdminId
    username: str
    password_hash: str
    created_at: datetime
