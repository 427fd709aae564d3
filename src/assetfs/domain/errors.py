from __future__ import annotations

"""
Asset Filesystem Error Taxonomy.

Defines the typed exceptions raised across the codec, reload engine,
virtual filesystem, template post-processor and generator. Lookup errors
also derive from the matching builtin OSError subclasses so callers that
only know the standard filesystem contract can still catch them.
"""

from typing import Optional


class AssetFSError(Exception):
    """Base class for every error raised by assetfs."""


class CodecError(AssetFSError):
    """Payload is not valid base64 or its zlib stream is corrupt/truncated."""


class EmptyRegistryError(AssetFSError):
    """A reload was attempted with zero registered descriptors."""

    def __init__(self, message: str = "no asset data registered") -> None:
        super().__init__(message)


class ReloadError(AssetFSError):
    """
    Wraps the first per-asset failure encountered while assembling a snapshot.

    Attributes:
        name: Normalized name of the offending asset.
    """

    def __init__(self, name: str, cause: Optional[BaseException] = None) -> None:
        self.name = name
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"reload failed on asset {name}{detail}")


class NotFoundError(AssetFSError, FileNotFoundError):
    """Lookup miss after name normalization."""

    def __init__(self, name: str) -> None:
        self.name = name
        AssetFSError.__init__(self, f"asset not found: {name}")

    def __str__(self) -> str:
        return f"asset not found: {self.name}"


class IsDirectoryError(AssetFSError, IsADirectoryError):
    """A file-only operation was attempted on a directory entry."""

    def __init__(self, name: str) -> None:
        self.name = name
        AssetFSError.__init__(self, f"asset is a directory: {name}")

    def __str__(self) -> str:
        return f"asset is a directory: {self.name}"


class TemplateError(AssetFSError):
    """Asset content could not be parsed or rendered as a template."""


class GeneratorError(AssetFSError):
    """The offline generator could not produce its output artifact."""
