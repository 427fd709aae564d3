from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Factories for encoded asset descriptors shared across tests.
"""

import os
import sys
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from assetfs.core import codec  # noqa: E402
from assetfs.core.services.registry import AssetRegistry  # noqa: E402
from assetfs.domain.asset_models import AssetDescriptor  # noqa: E402

DescriptorFactory = Callable[..., AssetDescriptor]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_descriptor() -> DescriptorFactory:
    """
    Return a factory building descriptors from plain content.

    Accepts str or bytes content; str is UTF-8 encoded.
    """
    def _factory(name: str, content: object, compress: bool = True) -> AssetDescriptor:
        raw = content.encode("utf-8") if isinstance(content, str) else content
        return AssetDescriptor(
            name=name,
            encoded_content=codec.encode(raw, compress),
            compressed=compress,
        )

    return _factory


@pytest.fixture
def corrupt_descriptor() -> AssetDescriptor:
    """A descriptor whose payload is not valid base64."""
    return AssetDescriptor(name="/broken.txt", encoded_content="!!not-base64!!", compressed=False)


@pytest.fixture
def scenario_descriptors(make_descriptor: DescriptorFactory) -> List[AssetDescriptor]:
    """
    '/a.txt' stored uncompressed and '/b/c.txt' stored compressed.
    """
    return [
        make_descriptor("/a.txt", "hi", compress=False),
        make_descriptor("/b/c.txt", "yo", compress=True),
    ]


@pytest.fixture
def scenario_registry(scenario_descriptors: List[AssetDescriptor]) -> AssetRegistry:
    """Registry pre-loaded with the two scenario descriptors."""
    registry = AssetRegistry()
    registry.register(*scenario_descriptors)
    return registry
