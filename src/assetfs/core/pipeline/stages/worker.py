from __future__ import annotations

"""
Atomic Decode Worker.

Encapsulates the materialization of a single asset descriptor: name
normalization, base64 decoding and optional zlib decompression. Designed
to run inside a ThreadPoolExecutor; codec failures are reported in the
result payload instead of being raised, so the orchestrator can decide
how to abort.
"""

import logging
from typing import Any, Dict

from assetfs.core import codec
from assetfs.domain.asset_models import AssetDescriptor, FileEntry
from assetfs.domain.errors import CodecError
from assetfs.infra.fs import normalize_asset_name

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode_asset_task(descriptor: AssetDescriptor) -> Dict[str, Any]:
    """
    Execute the full decode lifecycle for a single descriptor.

    Args:
        descriptor: Registered encoded asset.

    Returns:
        Dict[str, Any]: Task result. On success contains 'ok', 'name' and the
                        materialized 'entry'; on failure 'ok' is False and
                        'error' carries the CodecError tagged with 'name'.
    """
    name = normalize_asset_name(descriptor.name)

    try:
        content = codec.decode(descriptor.encoded_content, descriptor.compressed)
    except CodecError as e:
        logger.debug(f"Decode failed for {name}: {e}")
        return {
            "ok": False,
            "name": name,
            "error": e,
        }

    return {
        "ok": True,
        "name": name,
        "entry": FileEntry(name=name, content=content),
    }
