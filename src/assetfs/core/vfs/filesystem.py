from __future__ import annotations

"""
Virtual Filesystem Facade.

Serves open/stat/list/read queries from the snapshot produced by the reload
engine. A single lock guards both snapshot installation and every read
path, and it is held for the entire reload: readers block until decoding,
collection and directory synthesis have finished.

Lifecycle:
    Uninitialized -> Ready       first successful reload
    Ready -> Ready               each later successful reload (snapshot swap)
    any failed reload            state and snapshot left unchanged
"""

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from assetfs.core.pipeline.reload import reload_assets
from assetfs.core.processing.templating import apply_template
from assetfs.core.services.registry import AssetRegistry
from assetfs.core.vfs.handles import AssetDirectory, AssetFile
from assetfs.domain.asset_models import (
    AssetDescriptor,
    AssetStat,
    DirectoryEntry,
    Entry,
)
from assetfs.domain.errors import NotFoundError
from assetfs.infra.fs import is_descendant, normalize_asset_name

logger = logging.getLogger(__name__)

AssetHandle = Union[AssetFile, AssetDirectory]


class VirtualFileSystem:
    """
    In-memory filesystem reconstructed from registered asset descriptors.
    """

    def __init__(self, registry: Optional[AssetRegistry] = None) -> None:
        """
        Args:
            registry: Descriptor source. A private empty registry is created
                      when omitted.
        """
        self.registry = registry if registry is not None else AssetRegistry()
        self._lock = threading.Lock()
        self._snapshot: Dict[str, Entry] = {}
        self._ready = False

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        """True once a reload has succeeded."""
        return self._ready

    def reload(self) -> None:
        """
        Rebuild the snapshot from every registered descriptor.

        Raises:
            EmptyRegistryError: If the registry holds no descriptors.
            ReloadError: If any descriptor fails to decode. The previous
                         snapshot stays installed.
        """
        with self._lock:
            snapshot = reload_assets(self.registry.descriptors())
            self._snapshot = snapshot
            self._ready = True
        logger.info(f"Virtual filesystem reloaded with {len(snapshot)} entries.")

    def add(self, *descriptors: AssetDescriptor) -> None:
        """
        Register additional descriptors and reload synchronously.

        The descriptors stay registered even when the reload fails.
        """
        self.registry.register(*descriptors)
        self.reload()

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def open(self, name: str) -> AssetHandle:
        """
        Open an asset by name.

        Args:
            name: Asset path, normalized before lookup.

        Returns:
            AssetHandle: A fresh AssetFile cursor for files, or an
                         AssetDirectory for directories.

        Raises:
            NotFoundError: If no entry matches the normalized name.
        """
        with self._lock:
            entry = self._lookup(name)
            if isinstance(entry, DirectoryEntry):
                return AssetDirectory(entry, self._descendants(entry.name))
            return AssetFile(entry)

    def stat(self, name: str) -> AssetStat:
        """Return file information for an asset, raising NotFoundError if absent."""
        with self._lock:
            return AssetStat.from_entry(self._lookup(name))

    def files(self) -> List[str]:
        """Return every entry name (files and directories) in sorted order."""
        with self._lock:
            return sorted(self._snapshot)

    def belongs(self, name: str) -> bool:
        """Check whether a file or directory exists after normalization."""
        with self._lock:
            return normalize_asset_name(name) in self._snapshot

    def list_directory(self, name: str) -> List[AssetStat]:
        """
        List the whole subtree below a directory.

        Every entry whose path lies under the directory is returned, at any
        depth. Files and unknown names yield an empty list.
        """
        with self._lock:
            entry = self._snapshot.get(normalize_asset_name(name))
            if not isinstance(entry, DirectoryEntry):
                return []
            return self._descendants(entry.name)

    def summary(self) -> str:
        """
        Render a human-readable listing of all entries.

        Directories are included in the count and their placeholder size in
        the byte total.
        """
        with self._lock:
            entries = [self._snapshot[n] for n in sorted(self._snapshot)]

        lines = ["Virtual filesystem contains the following assets:"]
        lines.extend(e.name for e in entries)
        total_size = sum(e.size for e in entries)
        lines.append(
            f"Total: {len(entries)} file(s) and dir(s) of size is {total_size} bytes."
        )
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.summary()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.belongs(name)

    # -------------------------------------------------------------------------
    # TEMPLATING
    # -------------------------------------------------------------------------

    def apply_template(self, names: Sequence[str], data: Mapping[str, Any]) -> None:
        """
        Re-render named assets as templates in the live snapshot.

        The rendered content is not written back to the registry and is
        discarded by the next reload.

        Raises:
            NotFoundError: If a name is absent.
            IsDirectoryError: If a name is a directory.
            TemplateError: If parsing or rendering fails.
        """
        with self._lock:
            apply_template(self._snapshot, names, data)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS (lock held by caller)
    # -------------------------------------------------------------------------

    def _lookup(self, name: str) -> Entry:
        normalized = normalize_asset_name(name)
        entry = self._snapshot.get(normalized)
        if entry is None:
            raise NotFoundError(normalized)
        return entry

    def _descendants(self, directory: str) -> List[AssetStat]:
        return [
            AssetStat.from_entry(self._snapshot[n])
            for n in sorted(self._snapshot)
            if is_descendant(n, directory)
        ]


# -----------------------------------------------------------------------------
# FACTORY
# -----------------------------------------------------------------------------

def load_filesystem(registry: AssetRegistry) -> VirtualFileSystem:
    """
    Build a filesystem over a registry and perform its first reload.

    Raises:
        EmptyRegistryError: If the registry is empty.
        ReloadError: If any registered descriptor fails to decode.
    """
    fs = VirtualFileSystem(registry)
    fs.reload()
    return fs
