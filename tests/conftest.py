"""Shared test fixtures."""

import pytest

from src.common.config_loader import load_guide_settings
from src.models import SourceRecord


@pytest.fixture
def guide_settings():
    """Guide settings loaded from the repo's config/guide.yaml."""
    return load_guide_settings()


@pytest.fixture
def cobra_short():
    return SourceRecord(
        name="Cobra",
        description="Short one.",
        benefits=("Strengthens the spine.",),
        source="Yoga Journal - Poses",
    )


@pytest.fixture
def cobra_long():
    return SourceRecord(
        name="cobra",
        description="A longer more descriptive sentence.",
        benefits=("Opens the chest.", "Strengthens the spine."),
        suitable_for=("Good for desk workers.",),
        source="Yoga Alliance - Styles",
        image_url="https://img.example.org/cobra.jpg",
    )


@pytest.fixture
def types_sources():
    """Scraped 'types' section from two sources with one overlapping style."""
    return [
        {
            "source": "Yoga Journal - Types of Yoga",
            "data": [
                {
                    "name": "Hatha",
                    "description": "Hatha is slow.",
                    "benefits": ["It helps reduce stress."],
                    "suitable_for": [],
                },
                {
                    "name": "Vinyasa",
                    "description": "Vinyasa links breath with movement in a flowing sequence.",
                    "benefits": [],
                    "suitable_for": ["It is great for active people."],
                },
            ],
        },
        {
            "source": "Yoga Alliance - Styles",
            "data": [
                {
                    "name": "HATHA",
                    "description": "Hatha is a gentle, slower-paced practice of held postures.",
                    "benefits": ["It helps reduce stress.", "It improves balance."],
                    "suitable_for": ["It is ideal for beginners."],
                },
            ],
        },
    ]


@pytest.fixture
def poses_sources():
    return [
        {
            "source": "Yoga Journal - Poses",
            "data": [
                {"name": "Warrior II", "description": "A strong stance.", "category": "standing"},
                {"name": "Tree Pose", "description": "Balance on one leg.", "category": "standing"},
                {"name": "Corpse Pose", "description": "Rest.", "category": "other"},
                {"name": "Camel Pose", "description": "Kneel and arch your back."},
            ],
        },
        {
            "source": "Pose Library",
            "data": [
                {"name": "warrior ii", "description": "A strong, grounded standing stance.",
                 "category": "standing", "image_url": "https://img.example.org/w2.jpg"},
            ],
        },
    ]


@pytest.fixture
def benefits_sources():
    return [
        {
            "source": "Harvard Health - Yoga Benefits",
            "data": {
                "physical": ["Yoga improves flexibility.", "It increases muscle strength."],
                "mental": ["Yoga reduces stress."],
                "general": ["Better sleep habits."],
            },
        },
        {
            "source": "Second Source",
            "data": {
                "physical": ["Yoga improves flexibility."],
                "mental": [],
                "general": [],
            },
        },
    ]


@pytest.fixture
def tips_sources():
    return [
        {
            "source": "Yoga International - Practice Tips",
            "data": {
                "beginners": ["Start slowly and build up."],
                "practice": ["Focus on your breath."],
                "props": [],
            },
        },
    ]
