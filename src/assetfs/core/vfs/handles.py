from __future__ import annotations

"""
Virtual Filesystem Handles.

Open-file objects returned by the virtual filesystem. File handles are
independent in-memory cursors over an asset's bytes; directory handles
only answer stat/readdir, mirroring the capability set expected by
static file servers.
"""

import io
from typing import Any, List

from assetfs.domain.asset_models import AssetStat, DirectoryEntry, FileEntry
from assetfs.domain.errors import IsDirectoryError


class AssetFile(io.BytesIO):
    """
    Read-only, seekable view over a file asset's content.

    Each instance owns its own read position; handles opened on the same
    asset never affect one another.
    """

    def __init__(self, entry: FileEntry) -> None:
        super().__init__(entry.content)
        self.name = entry.name
        self._stat = AssetStat.from_entry(entry)

    def writable(self) -> bool:
        return False

    def write(self, data: Any) -> int:
        raise io.UnsupportedOperation("asset files are read-only")

    def truncate(self, size: Any = None) -> int:
        raise io.UnsupportedOperation("asset files are read-only")

    def stat(self) -> AssetStat:
        return self._stat

    def readdir(self, count: int = 0) -> List[AssetStat]:
        """Files have no children."""
        return []

    def __repr__(self) -> str:
        return f"<AssetFile name={self.name!r} size={self._stat.size}>"


class AssetDirectory:
    """
    Handle over a directory asset.

    The listing is captured from the snapshot at open time and covers the
    whole subtree below the directory, not only its immediate children.
    """

    def __init__(self, entry: DirectoryEntry, children: List[AssetStat]) -> None:
        self.name = entry.name
        self._stat = AssetStat.from_entry(entry)
        self._children = children
        self.closed = False

    def stat(self) -> AssetStat:
        return self._stat

    def readdir(self, count: int = 0) -> List[AssetStat]:
        """
        List the entries below this directory.

        Args:
            count: If positive, return at most this many entries.
        """
        if count > 0:
            return self._children[:count]
        return list(self._children)

    def read(self, *args: Any) -> bytes:
        raise IsDirectoryError(self.name)

    def seek(self, *args: Any) -> int:
        raise IsDirectoryError(self.name)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> AssetDirectory:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<AssetDirectory name={self.name!r} entries={len(self._children)}>"
