"""Settings — defaults, insecure-default detection and production refusal."""

import pytest

from wellspring.config import (
    DEFAULT_JWT_SECRET, DEFAULT_STRIPE_SECRET_KEY, Settings, validate_settings,
)


def _settings(**overrides) -> Settings:
    fields = {
        "jwt_secret": DEFAULT_JWT_SECRET,
        "stripe_secret_key": DEFAULT_STRIPE_SECRET_KEY,
        "environment": "development",
        "jwt_expires_minutes": None,
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


def test_defaults_are_flagged_insecure():
    weak = _settings().insecure_settings()
    assert any(w.startswith("JWT_SECRET") for w in weak)
    assert "STRIPE_SECRET_KEY" in weak
    assert any(w.startswith("JWT_EXPIRES_MINUTES") for w in weak)


def test_short_jwt_secret_is_insecure():
    weak = _settings(jwt_secret="short").insecure_settings()
    assert any(w.startswith("JWT_SECRET") for w in weak)


def test_strong_settings_pass():
    settings = _settings(
        jwt_secret="a-long-and-random-signing-secret",
        stripe_secret_key="sk_live_realkey",
        jwt_expires_minutes=60,
    )
    assert settings.insecure_settings() == []
    assert validate_settings(settings) == []


def test_development_tolerates_defaults():
    assert validate_settings(_settings()) != []


def test_production_refuses_defaults():
    with pytest.raises(RuntimeError, match="JWT_SECRET"):
        validate_settings(_settings(environment="production"))


def test_other_defaults():
    settings = _settings()
    assert settings.jwt_algorithm == "HS256"
    assert settings.bcrypt_rounds == 10
    assert settings.payment_currency == "usd"
    assert not settings.is_production
