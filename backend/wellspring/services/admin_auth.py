"""Admin Auth — password hashing, registration, login and bearer-token checks.

Invariants:
    - Passwords are stored only as salted bcrypt hashes
    - Tokens are HS256 JWTs carrying {id, username}; exp only when configured
    - Unknown username and wrong password fail identically (401)
    - Decoded claims reach handlers as an AdminClaims value, never as raw dicts
    - bcrypt work runs in the threadpool; store writes stay on the event loop

Design Decisions:
    - bcrypt directly over passlib: one algorithm, no scheme registry needed
    - Passwords truncated to bcrypt's 72-byte limit explicitly, matching what
      other bcrypt implementations do silently
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt
from starlette.concurrency import run_in_threadpool

from wellspring.config import Settings
from wellspring.core.domain_types import AdminId
from wellspring.core.errors import (
    InvalidCredentialsError, InvalidTokenError, MissingCredentialsError,
)
from wellspring.core.store import MemoryStore
from wellspring.models import Admin
from wellspring.schemas.admin import AdminCredentials

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class AdminClaims:
    """Identity proven by a verified bearer token."""
    id: AdminId
    username: str


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(
        _password_bytes(password), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(
            _password_bytes(password), password_hash.encode("utf-8"),
        )
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def issue_token(admin: Admin, settings: Settings) -> str:
    """Sign {id, username}; adds exp only when JWT_EXPIRES_MINUTES is set."""
    now = datetime.now(timezone.utc)
    claims: dict = {"id": admin.id, "username": admin.username, "iat": now}
    if settings.jwt_expires_minutes is not None:
        claims["exp"] = now + timedelta(minutes=settings.jwt_expires_minutes)
    return jwt.encode(
        claims, settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: Settings) -> AdminClaims:
    """Verify signature/expiry and return typed claims."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {type(e).__name__}")
        raise InvalidTokenError() from e
    admin_id = payload.get("id")
    username = payload.get("username")
    if (
        not isinstance(admin_id, int) or isinstance(admin_id, bool)
        or not isinstance(username, str)
    ):
        logger.warning("Rejected bearer token: malformed claims")
        raise InvalidTokenError()
    return AdminClaims(id=AdminId(admin_id), username=username)


async def register_admin(
    store: MemoryStore, credentials: AdminCredentials, settings: Settings,
) -> Admin:
    """Hash off the event loop, then insert on it."""
    if not credentials.complete:
        raise MissingCredentialsError()
    password_hash = await run_in_threadpool(
        hash_password, credentials.password, settings.bcrypt_rounds,
    )
    admin = store.create_admin(credentials.username, password_hash)
    logger.info("Admin registered", extra={"admin_id": admin.id})
    return admin


async def login(
    store: MemoryStore, credentials: AdminCredentials, settings: Settings,
) -> str:
    """Return a signed token for valid credentials, else raise 401."""
    admin = (
        store.find_admin_by_username(credentials.username)
        if credentials.username is not None else None
    )
    if admin is None or not await run_in_threadpool(
        verify_password, credentials.password or "", admin.password_hash,
    ):
        logger.warning("Failed admin login")
        raise InvalidCredentialsError()
    logger.info("Admin logged in", extra={"admin_id": admin.id})
    return issue_token(admin, settings)
