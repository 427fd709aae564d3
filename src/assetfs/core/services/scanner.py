from __future__ import annotations

"""
Source Tree Discovery Service.

Walks the generator's source directory in a deterministic order and yields
every regular file eligible for embedding, applying the exclusion glob to
file base names.
"""

import fnmatch
import logging
import os
from typing import Dict, Iterable

from assetfs.infra.fs import asset_name_for

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def yield_asset_files(source_dir: str, exclude: str = "") -> Iterable[Dict[str, str]]:
    """
    Traverse the source tree and yield files that should become assets.

    Directories and files are visited in sorted order so generated output is
    reproducible. Symlinks to directories are not followed; non-regular files
    (sockets, fifos, dangling links) are skipped.

    Args:
        source_dir: Root directory of the asset tree.
        exclude: fnmatch glob matched against each file's base name. Empty
                 disables exclusion.

    Yields:
        Dict[str, str]: Metadata for each file:
                        - file_path: Absolute path on disk.
                        - name: Asset name relative to the root.
                        - file_name: Base filename.
    """
    root_abs = os.path.abspath(source_dir)

    for root, dirs, files in os.walk(root_abs):
        dirs.sort()
        files.sort()

        for file_name in files:
            file_path = os.path.join(root, file_name)
            if not os.path.isfile(file_path):
                continue

            if exclude and fnmatch.fnmatchcase(file_name, exclude):
                logger.info(f"File {file_name!r} skipped by exclude pattern {exclude!r}")
                continue

            yield {
                "file_path": file_path,
                "name": asset_name_for(file_path, root_abs),
                "file_name": file_name,
            }
