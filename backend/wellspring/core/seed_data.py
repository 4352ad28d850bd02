"""Seed Data — demonstration rows inserted when a MemoryStore is built."""

from wellspring.schemas.content import PartnerCreate, ResourceCreate

SEED_RESOURCES: tuple[ResourceCreate, ...] = (
    ResourceCreate(
        title="Understanding Anxiety",
        description="Learn about anxiety disorders and coping mechanisms",
        category="Mental Health 101",
        content="Comprehensive guide about anxiety...",
        tags=["anxiety", "mental health", "self-help"],
    ),
    ResourceCreate(
        title="Meditation Basics",
        description="Introduction to meditation practices",
        category="Self-Care",
        content="Guide to meditation techniques...",
        tags=["meditation", "mindfulness", "wellness"],
    ),
)

SEED_PARTNERS: tuple[PartnerCreate, ...] = (
    PartnerCreate(
        name="Mental Health Foundation",
        description="Leading mental health research organization",
        website="https://example.com",
        logo="mhf-logo",
        type="collaborator",
    ),
)
