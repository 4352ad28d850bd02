"""Payload Schemas — structural validation of inbound request bodies.

Invariants:
    - Required fields must be present and of the right type
    - Optional fields default to None; unknown keys are ignored
    - Partial updates reject explicit null for required-on-create fields
"""

import pytest
from pydantic import ValidationError

from wellspring.core.domain_types import ContentStatus
from wellspring.schemas.admin import AdminCredentials
from wellspring.schemas.content import HealthContentCreate, HealthContentUpdate
from wellspring.schemas.donation import DonationCreate
from wellspring.schemas.volunteer import VolunteerCreate


# --- Volunteers ---------------------------------------------------------------

def test_volunteer_requires_name_and_email():
    with pytest.raises(ValidationError):
        VolunteerCreate(name="Ana")


def test_volunteer_optional_fields_default_to_none():
    v = VolunteerCreate(name="Ana", email="ana@example.org")
    assert v.phone is None
    assert v.availability is None
    assert v.skills is None


def test_volunteer_ignores_unknown_keys():
    v = VolunteerCreate.model_validate(
        {"name": "Ana", "email": "ana@example.org", "id": 42},
    )
    assert "id" not in v.model_dump()


def test_volunteer_rejects_non_string_name():
    with pytest.raises(ValidationError):
        VolunteerCreate.model_validate({"name": 7, "email": "ana@example.org"})


# --- Donations ----------------------------------------------------------------

def test_donation_amount_must_be_positive():
    with pytest.raises(ValidationError):
        DonationCreate(name="Bo", email="bo@example.org", amount=0)
    with pytest.raises(ValidationError):
        DonationCreate(name="Bo", email="bo@example.org", amount=-5)


def test_donation_message_optional():
    d = DonationCreate(name="Bo", email="bo@example.org", amount=50)
    assert d.message is None


# --- Admin credentials --------------------------------------------------------

def test_credentials_complete_requires_both_non_empty():
    assert AdminCredentials(username="a", password="b").complete
    assert not AdminCredentials(username="a").complete
    assert not AdminCredentials(username="", password="b").complete


# --- Health content -----------------------------------------------------------

def test_health_content_create_defaults():
    c = HealthContentCreate(title="T", content="C", category="Wellness")
    assert c.status == ContentStatus.DRAFT
    assert c.tags is None


def test_health_content_create_rejects_unknown_status():
    with pytest.raises(ValidationError):
        HealthContentCreate(
            title="T", content="C", category="Wellness", status="deleted",
        )


def test_health_content_create_requires_title():
    with pytest.raises(ValidationError):
        HealthContentCreate(content="C", category="Wellness")


def test_update_changes_only_include_sent_fields():
    update = HealthContentUpdate.model_validate({"title": "New"})
    assert update.changes() == {"title": "New"}


def test_update_empty_body_has_no_changes():
    assert HealthContentUpdate.model_validate({}).changes() == {}


def test_update_rejects_null_title():
    with pytest.raises(ValidationError):
        HealthContentUpdate.model_validate({"title": None})


def test_update_allows_null_summary():
    update = HealthContentUpdate.model_validate({"summary": None})
    assert update.changes() == {"summary": None}


def test_update_rejects_wrong_tag_type():
    with pytest.raises(ValidationError):
        HealthContentUpdate.model_validate({"tags": "sleep"})
