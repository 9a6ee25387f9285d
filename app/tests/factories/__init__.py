"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FakeClock,
    ObjectStoreStub,
    make_dictionary,
    make_remote_payload,
    make_snapshots,
)

__all__ = [
    "FakeClock",
    "ObjectStoreStub",
    "make_dictionary",
    "make_remote_payload",
    "make_snapshots",
]
