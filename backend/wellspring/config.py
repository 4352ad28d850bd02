"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables; defaults are for local development only
    - get_settings() is cached (lru_cache) — single instance per process
    - ENVIRONMENT=production refuses to start with the insecure default secrets

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Insecure defaults kept so the site works out-of-the-box with a Stripe test key
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STRIPE_SECRET_KEY = "sk_test_default"
DEFAULT_JWT_SECRET = "dev_secret"
_MIN_JWT_SECRET_LENGTH = 16


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "development"

    # Stripe
    stripe_secret_key: str = DEFAULT_STRIPE_SECRET_KEY
    payment_currency: str = "usd"

    # Admin auth
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int | None = None
    bcrypt_rounds: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def insecure_settings(self) -> list[str]:
        """Names of settings still running on development defaults."""
        weak = []
        if (
            self.jwt_secret.strip() in {"", DEFAULT_JWT_SECRET}
            or len(self.jwt_secret) < _MIN_JWT_SECRET_LENGTH
        ):
            weak.append(
                f"JWT_SECRET (must be >={_MIN_JWT_SECRET_LENGTH} chars, "
                f"not '{DEFAULT_JWT_SECRET}')",
            )
        if self.stripe_secret_key.strip() in {"", DEFAULT_STRIPE_SECRET_KEY}:
            weak.append("STRIPE_SECRET_KEY")
        if self.jwt_expires_minutes is None:
            weak.append("JWT_EXPIRES_MINUTES (tokens never expire)")
        return weak


def validate_settings(settings: Settings) -> list[str]:
    """Return insecure settings; raise in production if any remain."""
    weak = settings.insecure_settings()
    if weak and settings.is_production:
        raise RuntimeError(
            "CRITICAL: insecure configuration for production: "
            f"{', '.join(weak)}. Set these in your .env file or deployment environment.",
        )
    return weak


@lru_cache
def get_settings() -> Settings:
    return Settings()
