from __future__ import annotations

"""
Atomic Descriptor Builder.

Reads one source file and turns it into an encoded asset descriptor.
Runs inside the generator's ThreadPoolExecutor; I/O failures are reported
in the result payload so every failing file can be listed at the end.
"""

import logging
from typing import Any, Dict

from assetfs.core import codec
from assetfs.domain.asset_models import AssetDescriptor

logger = logging.getLogger(__name__)


def build_descriptor_task(file_path: str, name: str, compress: bool) -> Dict[str, Any]:
    """
    Read, optionally compress, and encode a single file.

    Args:
        file_path: Path of the source file.
        name: Asset name assigned to the file.
        compress: Apply zlib compression before encoding.

    Returns:
        Dict[str, Any]: 'ok' and 'descriptor' on success, or 'ok' False with
                        'name' and 'error' describing the I/O failure.
    """
    try:
        with open(file_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.error(f"Error reading file {file_path!r}: {e}")
        return {"ok": False, "name": name, "error": f"error reading file {file_path!r}: {e}"}

    descriptor = AssetDescriptor(
        name=name,
        encoded_content=codec.encode(raw, compress),
        compressed=compress,
    )
    logger.debug(f"Built {name} ({len(raw)} bytes, compressed={compress})")
    return {"ok": True, "name": name, "descriptor": descriptor}
