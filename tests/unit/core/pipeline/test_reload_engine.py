from __future__ import annotations

"""
Unit tests for the Parallel Reload Orchestrator.

Verifies:
1. Empty input is rejected.
2. Every descriptor is decoded and every ancestor directory synthesized.
3. A single failure aborts the whole reload, wrapped in ReloadError.
4. All spawned tasks complete before the failure propagates.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from assetfs.core.pipeline.reload import reload_assets
from assetfs.core.pipeline.stages.worker import decode_asset_task
from assetfs.domain.asset_models import DirectoryEntry, FileEntry
from assetfs.domain.errors import CodecError, EmptyRegistryError, ReloadError
from assetfs.infra.fs import iter_ancestors


def test_empty_descriptor_list_raises() -> None:
    with pytest.raises(EmptyRegistryError):
        reload_assets([])


def test_reload_builds_scenario_snapshot(scenario_descriptors) -> None:
    snapshot = reload_assets(scenario_descriptors)

    assert sorted(snapshot) == ["/", "/a.txt", "/b", "/b/c.txt"]
    assert snapshot["/a.txt"] == FileEntry("/a.txt", b"hi")
    assert snapshot["/b/c.txt"] == FileEntry("/b/c.txt", b"yo")
    assert isinstance(snapshot["/b"], DirectoryEntry)
    assert isinstance(snapshot["/"], DirectoryEntry)


def test_every_ancestor_is_synthesized(make_descriptor) -> None:
    descriptors = [
        make_descriptor("/x/y/z/deep.txt", "1"),
        make_descriptor("/x/other.txt", "2"),
        make_descriptor("/q/r/s.txt", "3", compress=False),
    ]

    snapshot = reload_assets(descriptors)

    for name, entry in list(snapshot.items()):
        for ancestor in iter_ancestors(name):
            assert ancestor in snapshot
            assert snapshot[ancestor].is_dir
    assert {"/x", "/x/y", "/x/y/z", "/q", "/q/r", "/"} <= set(snapshot)


def test_names_are_normalized(make_descriptor) -> None:
    snapshot = reload_assets([make_descriptor("docs/../docs//readme.md", "r")])
    assert "/docs/readme.md" in snapshot


def test_duplicate_names_keep_a_single_entry(make_descriptor) -> None:
    """The winner is unspecified, but exactly one entry survives."""
    snapshot = reload_assets([
        make_descriptor("/dup.txt", "one"),
        make_descriptor("dup.txt", "two"),
    ])

    assert snapshot["/dup.txt"].content in (b"one", b"two")
    assert sorted(snapshot) == ["/", "/dup.txt"]


def test_single_failure_aborts_reload(make_descriptor, corrupt_descriptor) -> None:
    with pytest.raises(ReloadError) as excinfo:
        reload_assets([make_descriptor("/ok.txt", "fine"), corrupt_descriptor])

    assert excinfo.value.name == "/broken.txt"
    assert isinstance(excinfo.value.__cause__, CodecError)


def test_all_tasks_finish_before_failure_propagates(make_descriptor, corrupt_descriptor) -> None:
    """The collector joins every spawned task; nothing is cancelled."""
    finished = []
    lock = threading.Lock()

    def tracking_task(descriptor):
        result = decode_asset_task(descriptor)
        with lock:
            finished.append(descriptor.name)
        return result

    descriptors = [corrupt_descriptor] + [
        make_descriptor(f"/f{i}.txt", str(i)) for i in range(20)
    ]

    with patch("assetfs.core.pipeline.reload.decode_asset_task", side_effect=tracking_task):
        with pytest.raises(ReloadError):
            reload_assets(descriptors)

    assert len(finished) == len(descriptors)


def test_one_worker_per_descriptor(make_descriptor) -> None:
    """The executor is sized to the descriptor count."""
    descriptors = [make_descriptor(f"/f{i}.txt", str(i)) for i in range(7)]

    with patch("assetfs.core.pipeline.reload.ThreadPoolExecutor", wraps=ThreadPoolExecutor) as pool:
        reload_assets(descriptors)

    assert pool.call_args.kwargs["max_workers"] == 7
