from __future__ import annotations

"""
Unit tests for the Atomic Decode Worker.

Verifies name normalization, successful materialization and error tagging.
"""

from assetfs.core.pipeline.stages.worker import decode_asset_task
from assetfs.domain.asset_models import AssetDescriptor, FileEntry
from assetfs.domain.errors import CodecError


def test_worker_materializes_file_entry(make_descriptor) -> None:
    result = decode_asset_task(make_descriptor("b//./c.txt", "yo"))

    assert result["ok"] is True
    assert result["name"] == "/b/c.txt"
    entry = result["entry"]
    assert isinstance(entry, FileEntry)
    assert entry.content == b"yo"
    assert entry.size == 2


def test_worker_reports_codec_failure_with_name(corrupt_descriptor) -> None:
    result = decode_asset_task(corrupt_descriptor)

    assert result["ok"] is False
    assert result["name"] == "/broken.txt"
    assert isinstance(result["error"], CodecError)


def test_worker_reports_bad_compression_flag(make_descriptor) -> None:
    """An uncompressed payload flagged as compressed fails to inflate."""
    plain = make_descriptor("/x.txt", "not zlib", compress=False)
    mislabeled = AssetDescriptor(plain.name, plain.encoded_content, compressed=True)

    result = decode_asset_task(mislabeled)

    assert result["ok"] is False
    assert "zlib" in str(result["error"])
