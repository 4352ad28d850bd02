"""Admin Schemas — credentials for registration and login.

Invariants:
    - Both fields optional at the schema level so a missing field maps to the
      endpoint's own error (400 on register, 401 on login), not a generic 400
"""

from pydantic import BaseModel


class AdminCredentials(BaseModel):
    """Username/password pair posted to /api/admin/register and /api/login."""
    username: str | None = None
    password: str | None = None

    @property
    def complete(self) -> bool:
        return bool(self.username) and bool(self.password)


class AdminPublic(BaseModel):
    """Public admin fields — never includes the password hash."""
    id: int
    username: str
