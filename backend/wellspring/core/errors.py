"""Error Hierarchy — typed, categorized exceptions for all Wellspring failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; upstream errors (500-level) are critical
    - to_response() produces the REST body for the endpoint family the error belongs to
    - No internal details leaked in user-facing messages
    - category, severity and context go to logs (log_fields), never to bodies

Design Decisions:
    - Single hierarchy with WellspringError base: FastAPI global handler catches all
    - Two body shapes kept on purpose: content endpoints answer {"error": ...},
      auth endpoints answer {"success": false, "message": ...} (the web client reads both)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    entity: str | None = None
    entity_id: int | None = None
    debug_info: dict[str, Any] | None = None


class WellspringError(Exception):
    """Base exception for all Wellspring errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the content-endpoint error body."""
        return {"error": self.message, "code": self.code}

    def log_fields(self) -> dict:
        """Structured log extras: code, category, severity and any context set."""
        fields = {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "entity": self.context.entity,
            "entity_id": self.context.entity_id,
            "debug_info": self.context.debug_info,
        }
        return {k: v for k, v in fields.items() if v is not None}


class AuthError(WellspringError):
    """Base for admin auth failures — answers with the {success, message} body."""

    def to_response(self) -> dict:
        return {"success": False, "message": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(WellspringError):
    """Request body failed schema validation."""
    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        body = super().to_response()
        if self.details:
            body["details"] = self.details
        return body


class MissingCredentialsError(AuthError):
    """Registration attempted without username or password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Username and password required",
            "CREDENTIALS_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(AuthError):
    """Unknown username or password mismatch on login."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingTokenError(AuthError):
    """Protected endpoint called without a bearer token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No token provided",
            "TOKEN_MISSING", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class InvalidTokenError(AuthError):
    """Bearer token failed signature, expiry or claims checks."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid Token",
            "TOKEN_INVALID", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(WellspringError):
    """Requested record does not exist."""
    def __init__(
        self, message: str, entity: str, entity_id: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.entity_id = entity_id
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Upstream Errors (500-level) ────────────────────────────────

class PaymentGatewayError(WellspringError):
    """Payment processor call failed."""
    def __init__(
        self, provider_message: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"provider_message": provider_message}
        super().__init__(
            "Failed to create payment intent",
            "PAYMENT_GATEWAY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
