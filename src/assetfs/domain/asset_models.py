from __future__ import annotations

"""
Asset Domain Data Models.

Defines the encoded descriptor contributed by producers and the two
materialized variants served by the virtual filesystem. Directory entries
are a distinct type so file-only operations can reject them by type.
"""

import stat as stat_mod
from dataclasses import dataclass
from typing import Dict, Union

# -----------------------------------------------------------------------------
# PERMISSION MARKERS
# -----------------------------------------------------------------------------

DIR_MODE: int = stat_mod.S_IFDIR | 0o755
FILE_MODE: int = stat_mod.S_IFREG | 0o644

# -----------------------------------------------------------------------------
# REGISTERED FORM
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetDescriptor:
    """
    Encoded form of an asset as registered by a producer.

    Attributes:
        name: Absolute slash-separated path of the asset.
        encoded_content: Base64 text of the (optionally compressed) payload.
        compressed: True if the payload was zlib-compressed before encoding.
    """
    name: str
    encoded_content: str
    compressed: bool = True

# -----------------------------------------------------------------------------
# MATERIALIZED FORM
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Decoded file asset held in a snapshot.

    Attributes:
        name: Normalized absolute path.
        content: Decoded, decompressed bytes.
    """
    name: str
    content: bytes

    is_dir = False
    mode = FILE_MODE
    mtime = 0

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Directory inferred from the parent chain of file entries.

    Its size is the byte length of its own path string, the placeholder
    content counted by filesystem summaries.
    """
    name: str

    is_dir = True
    mode = DIR_MODE
    mtime = 0

    @property
    def size(self) -> int:
        return len(self.name.encode("utf-8"))


@dataclass(frozen=True)
class AssetStat:
    """
    File information record exposed to file-serving hosts.

    Attributes:
        name: Normalized absolute path.
        size: Content length in bytes.
        mode: Type and permission bits.
        is_dir: True for directory entries.
        mtime: Modification time; always 0 since no timestamps are tracked.
    """
    name: str
    size: int
    mode: int
    is_dir: bool
    mtime: float = 0

    @classmethod
    def from_entry(cls, entry: Entry) -> AssetStat:
        return cls(
            name=entry.name,
            size=entry.size,
            mode=entry.mode,
            is_dir=entry.is_dir,
            mtime=entry.mtime,
        )


Entry = Union[FileEntry, DirectoryEntry]
Snapshot = Dict[str, Entry]
