from __future__ import annotations

"""
Asset Registry Service.

Append-only store of encoded asset descriptors contributed by generated
modules and runtime callers. Registration never validates or deduplicates;
malformed payloads surface later, when a reload decodes them.

The registry is not synchronized. Registering from several threads at once
is not a supported use case.
"""

import logging
from typing import Iterator, List

from assetfs.domain.asset_models import AssetDescriptor

logger = logging.getLogger(__name__)


class AssetRegistry:
    """
    Ordered collection of descriptors owned by whoever builds the filesystem.
    """

    def __init__(self) -> None:
        self._descriptors: List[AssetDescriptor] = []

    def register(self, *descriptors: AssetDescriptor) -> None:
        """
        Append descriptors for inclusion in the next reload.

        Args:
            *descriptors: Descriptors in the order they should be recorded.
        """
        self._descriptors.extend(descriptors)
        logger.debug(
            f"Registry: {len(descriptors)} descriptor(s) registered "
            f"({len(self._descriptors)} total)."
        )

    def descriptors(self) -> List[AssetDescriptor]:
        """Return a copy of every registered descriptor in registration order."""
        return list(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[AssetDescriptor]:
        return iter(self.descriptors())
