from __future__ import annotations

"""
Asset Payload Codec.

Reversible transform between raw bytes and the text-safe payload carried
by asset descriptors: optional zlib compression followed by standard
base64. Decoding is all-or-nothing; any malformed layer raises CodecError.
"""

import base64
import binascii
import zlib

from assetfs.domain.errors import CodecError

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def encode(raw: bytes, compress: bool = True) -> str:
    """
    Encode raw bytes into descriptor payload text.

    Args:
        raw: File content.
        compress: Apply zlib compression before base64 encoding.

    Returns:
        str: ASCII base64 text.
    """
    data = zlib.compress(raw) if compress else raw
    return base64.b64encode(data).decode("ascii")


def decode(text: str, was_compressed: bool = True) -> bytes:
    """
    Decode descriptor payload text back into the original bytes.

    Args:
        text: Base64 payload, line-wrapped or not.
        was_compressed: True if the payload carries a zlib stream.

    Returns:
        bytes: The original content.

    Raises:
        CodecError: If the base64 text is invalid, or the zlib stream is
                    corrupt, truncated or followed by trailing garbage.
    """
    try:
        data = base64.b64decode("".join(text.split()), validate=True)
    except (binascii.Error, ValueError, AttributeError) as e:
        raise CodecError(f"invalid base64 payload: {e}") from e

    if not was_compressed:
        return data

    return _inflate(data)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _inflate(data: bytes) -> bytes:
    """Decompress a complete zlib stream, rejecting truncation."""
    decompressor = zlib.decompressobj()
    try:
        out = decompressor.decompress(data)
        out += decompressor.flush()
    except zlib.error as e:
        raise CodecError(f"corrupt zlib stream: {e}") from e

    if not decompressor.eof:
        raise CodecError("truncated zlib stream")
    if decompressor.unused_data:
        raise CodecError("trailing data after zlib stream")
    return out
