"""Shared fixtures for the portal tests."""

from datetime import date

import pytest

from campus_portal.config.storage import StorageConfig
from campus_portal.models import NewEvent, NewODRequest, Student
from campus_portal.storage import MemoryStorage, SQLiteStorage
from campus_portal.stores import CertificateStore, EventStore, ODStore


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def sqlite_storage(tmp_path):
    """SQLite-backed storage in a per-test file."""
    store = SQLiteStorage(StorageConfig(sqlite_path=tmp_path / 'portal.db'))
    yield store
    store.dispose()


@pytest.fixture
def event_store():
    return EventStore()


@pytest.fixture
def certificate_store():
    return CertificateStore()


@pytest.fixture
def od_store():
    return ODStore()


@pytest.fixture
def make_event():
    """Factory for valid event details; keyword arguments override defaults."""
    def _make(**overrides):
        details = dict(
            title="Tech Fest",
            description="Annual technical festival",
            date=date(2025, 3, 4),
            time="10:00 AM - 4:00 PM",
            location="Main Auditorium",
            category="Fest",
            organizer="CSE Department",
            capacity=100,
            image="https://example.com/fest.png",
        )
        details.update(overrides)
        return NewEvent(**details)
    return _make


@pytest.fixture
def new_request():
    return NewODRequest(
        reason="Hackathon participation",
        event="Smart India Hackathon",
        date="2025-03-10",
        description="Representing the department",
        time="9:00 AM",
    )


@pytest.fixture
def student():
    return Student(name="Priya Raman", id="SIST2022CS001")
