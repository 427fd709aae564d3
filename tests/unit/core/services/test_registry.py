from __future__ import annotations

"""
Unit tests for the Asset Registry.

Verifies append-only ordering, absence of validation/deduplication, and
isolation between independent registries.
"""

from assetfs.core.services.registry import AssetRegistry
from assetfs.domain.asset_models import AssetDescriptor


def test_register_appends_in_order(make_descriptor) -> None:
    registry = AssetRegistry()
    a = make_descriptor("/a.txt", "a")
    b = make_descriptor("/b.txt", "b")

    registry.register(a)
    registry.register(b)

    assert registry.descriptors() == [a, b]
    assert len(registry) == 2
    assert list(registry) == [a, b]


def test_register_accepts_invalid_and_duplicate_descriptors(make_descriptor) -> None:
    """Errors surface at reload time, never at registration."""
    registry = AssetRegistry()
    bad = AssetDescriptor(name="/bad", encoded_content="***", compressed=True)
    dup = make_descriptor("/a.txt", "a")

    registry.register(bad, dup, dup)

    assert len(registry) == 3


def test_descriptors_returns_a_copy(make_descriptor) -> None:
    registry = AssetRegistry()
    registry.register(make_descriptor("/a.txt", "a"))

    snapshot = registry.descriptors()
    snapshot.clear()

    assert len(registry) == 1


def test_registries_are_independent(make_descriptor) -> None:
    first, second = AssetRegistry(), AssetRegistry()
    first.register(make_descriptor("/a.txt", "a"))

    assert len(first) == 1
    assert len(second) == 0
