from __future__ import annotations

"""
Parallel Reload Orchestrator.

Builds a complete snapshot from a list of descriptors: one decode task per
descriptor, a single collector over the completed futures, and a post-pass
that synthesizes every missing ancestor directory. Any decode failure aborts
the whole reload; no partial snapshot is ever returned.

Completion order is arbitrary. When several descriptors fail, which one is
reported is not deterministic, and when two descriptors normalize to the
same name, which one ends up in the snapshot is not deterministic either.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence

from assetfs.core.pipeline.stages.worker import decode_asset_task
from assetfs.domain.asset_models import AssetDescriptor, DirectoryEntry, Snapshot
from assetfs.domain.errors import EmptyRegistryError, ReloadError
from assetfs.infra.fs import iter_ancestors

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def reload_assets(descriptors: Sequence[AssetDescriptor]) -> Snapshot:
    """
    Decode every descriptor concurrently and assemble a consistent snapshot.

    The executor context acts as the join barrier: even when a failure
    short-circuits collection, every spawned task runs to completion before
    the error propagates. Tasks are never cancelled.

    Args:
        descriptors: Registered descriptors to materialize.

    Returns:
        Snapshot: Mapping of normalized name to file or directory entry.

    Raises:
        EmptyRegistryError: If no descriptors are given.
        ReloadError: Wrapping the first decode failure collected.
    """
    if not descriptors:
        raise EmptyRegistryError()

    logger.debug(f"Reload started for {len(descriptors)} descriptor(s).")
    snapshot: Snapshot = {}

    with ThreadPoolExecutor(
            max_workers=len(descriptors),
            thread_name_prefix="AssetDecodeWorker"
    ) as executor:
        tasks = [executor.submit(decode_asset_task, d) for d in descriptors]

        for future in as_completed(tasks):
            result = future.result()
            if not result["ok"]:
                logger.error(f"Reload aborted on {result['name']}: {result['error']}")
                raise ReloadError(result["name"], result["error"]) from result["error"]

            name = result["name"]
            if name in snapshot:
                logger.warning(f"Duplicate asset name {name}: winner is unspecified.")
            snapshot[name] = result["entry"]

    added = _synthesize_directories(snapshot)
    logger.debug(
        f"Reload assembled {len(snapshot)} entries "
        f"({added} synthesized director{'y' if added == 1 else 'ies'})."
    )
    return snapshot


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _synthesize_directories(snapshot: Snapshot) -> int:
    """
    Insert a directory entry for every ancestor missing from the snapshot.

    Walks each entry's parent chain upward and stops at the first ancestor
    already present, so each directory is created once.

    Returns:
        int: Number of directory entries added.
    """
    added = 0
    for name in list(snapshot):
        for ancestor in iter_ancestors(name):
            if ancestor in snapshot:
                break
            snapshot[ancestor] = DirectoryEntry(name=ancestor)
            added += 1
    return added
