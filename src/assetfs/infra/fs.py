from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path rules shared by the virtual filesystem and the generator:
asset name normalization, ancestor traversal, segment-aware descendant
checks, and the host-path helpers used when walking a source tree.
"""

import os
import posixpath
from typing import Iterator, Optional, Tuple

ROOT = "/"

# -----------------------------------------------------------------------------
# ASSET NAME API
# -----------------------------------------------------------------------------

def normalize_asset_name(name: str) -> str:
    """
    Rewrite an asset name into its canonical absolute form.

    Backslashes are treated as separators, '.' and '..' segments are
    resolved against the root, and leading slashes are collapsed to one.
    The result is stable under repeated application.

    Args:
        name: Raw asset name, absolute or relative.

    Returns:
        str: Cleaned absolute path ('/' for empty input).
    """
    cleaned = posixpath.normpath(posixpath.join(ROOT, (name or "").replace("\\", "/")))
    # POSIX keeps a double leading slash, asset names never do.
    return ROOT + cleaned.lstrip("/")


def parent_dir(name: str) -> str:
    """Return the parent directory of a normalized name ('/' for root)."""
    return posixpath.dirname(name) or ROOT


def iter_ancestors(name: str) -> Iterator[str]:
    """
    Yield every ancestor directory of a normalized name.

    Starts at the immediate parent and ends at the root. Yields nothing
    for the root itself.
    """
    current = name
    while current != ROOT:
        current = parent_dir(current)
        yield current


def is_descendant(name: str, directory: str) -> bool:
    """
    Check whether a normalized name lies strictly below a directory.

    Matching is segment-aware: '/b/c' is below '/b' but '/bc' is not.
    """
    if name == directory:
        return False
    if directory == ROOT:
        return name.startswith(ROOT)
    return name.startswith(directory + "/")

# -----------------------------------------------------------------------------
# HOST PATH API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a host directory path string into an absolute path.

    Handles environment variable expansion and user home shortcuts.
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def asset_name_for(file_path: str, source_root: str) -> str:
    """
    Derive the asset name of a host file relative to the source root.

    Args:
        file_path: Path of the file on disk.
        source_root: Directory the asset tree is rooted at.

    Returns:
        str: Normalized absolute asset name using '/' separators.
    """
    rel_path = os.path.relpath(file_path, source_root)
    return normalize_asset_name(rel_path.replace(os.sep, "/"))


def inspect_target(path: str) -> Tuple[bool, bool]:
    """
    Report whether a target artifact path exists and if it is a directory.

    Returns:
        Tuple[bool, bool]: (exists, is_dir).
    """
    if not os.path.lexists(path):
        return False, False
    return True, os.path.isdir(path)
