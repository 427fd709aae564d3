from __future__ import annotations

"""
Embedded assets filesystem.

Generated asset modules import AssetDescriptor and AssetRegistry from here;
applications build a VirtualFileSystem over a registry and serve it.
"""

from assetfs.core.codec import decode, encode
from assetfs.core.services.registry import AssetRegistry
from assetfs.core.vfs.filesystem import VirtualFileSystem, load_filesystem
from assetfs.core.vfs.handles import AssetDirectory, AssetFile
from assetfs.domain.asset_models import AssetDescriptor, AssetStat, DirectoryEntry, FileEntry
from assetfs.domain.errors import (
    AssetFSError,
    CodecError,
    EmptyRegistryError,
    GeneratorError,
    IsDirectoryError,
    NotFoundError,
    ReloadError,
    TemplateError,
)

__version__ = "0.1.0"

__all__ = [
    "AssetDescriptor",
    "AssetDirectory",
    "AssetFile",
    "AssetRegistry",
    "AssetStat",
    "DirectoryEntry",
    "FileEntry",
    "VirtualFileSystem",
    "load_filesystem",
    "encode",
    "decode",
    "AssetFSError",
    "CodecError",
    "EmptyRegistryError",
    "GeneratorError",
    "IsDirectoryError",
    "NotFoundError",
    "ReloadError",
    "TemplateError",
]
