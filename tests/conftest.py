"""
Pytest configuration and shared fixtures.

Provides word stores, sample records and a Flask test client, and configures
Hypothesis for the property-based tests.
"""

import pytest
from datetime import datetime
from hypothesis import settings, Verbosity

from word_trainer.models import WordRecord
from word_trainer.settings import SettingsManager
from word_trainer.store import InMemoryWordStore, JsonWordStore


# Configure Hypothesis for property-based testing
settings.register_profile("word_trainer",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None
)
settings.load_profile("word_trainer")


def pytest_configure(config):
    config.addinivalue_line("markers", "property: property-based tests using Hypothesis")


@pytest.fixture
def house():
    """A word part way to mastery."""
    return WordRecord(
        id="11111111-1111-4111-8111-111111111111",
        native="House",
        foreign="Maison",
        score=3,
        created_at=datetime(2026, 1, 10, 9, 30),
        mastered=False
    )


@pytest.fixture
def memory_store():
    """Empty in-memory store."""
    return InMemoryWordStore()


@pytest.fixture
def json_store(tmp_path):
    """Empty JSON store in a temporary directory."""
    return JsonWordStore(tmp_path / "words.json", seed_samples=False)


@pytest.fixture
def settings_manager(tmp_path):
    """Settings stored in a temporary directory."""
    return SettingsManager(tmp_path / "settings.json")
