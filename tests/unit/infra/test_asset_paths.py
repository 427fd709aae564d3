from __future__ import annotations

"""
Unit tests for asset name normalization and path helpers.
"""

import os

import pytest

from assetfs.infra.fs import (
    asset_name_for,
    inspect_target,
    is_descendant,
    iter_ancestors,
    normalize_asset_name,
    parent_dir,
)


@pytest.mark.parametrize("raw, expected", [
    ("", "/"),
    ("/", "/"),
    ("a.txt", "/a.txt"),
    ("/a.txt", "/a.txt"),
    ("//a.txt", "/a.txt"),
    ("///b//c.txt", "/b/c.txt"),
    ("/b/./c.txt", "/b/c.txt"),
    ("/b/../a.txt", "/a.txt"),
    ("../../etc/passwd", "/etc/passwd"),
    ("/b/", "/b"),
    ("b\\c.txt", "/b/c.txt"),
    (".", "/"),
])
def test_normalize_asset_name(raw: str, expected: str) -> None:
    assert normalize_asset_name(raw) == expected


@pytest.mark.parametrize("raw", [
    "", "/", "a", "//x//y/", "/./..", "a/b/../../c", "\\\\srv\\share", "/a/b/c/",
])
def test_normalization_is_idempotent(raw: str) -> None:
    once = normalize_asset_name(raw)
    assert normalize_asset_name(once) == once


def test_parent_dir() -> None:
    assert parent_dir("/b/c.txt") == "/b"
    assert parent_dir("/a.txt") == "/"
    assert parent_dir("/") == "/"


def test_iter_ancestors_reaches_root() -> None:
    assert list(iter_ancestors("/x/y/z.txt")) == ["/x/y", "/x", "/"]
    assert list(iter_ancestors("/a.txt")) == ["/"]
    assert list(iter_ancestors("/")) == []


def test_is_descendant_is_segment_aware() -> None:
    assert is_descendant("/b/c.txt", "/b")
    assert is_descendant("/b/d/e.txt", "/b")
    assert not is_descendant("/bc.txt", "/b")
    assert not is_descendant("/b", "/b")


def test_everything_descends_from_root() -> None:
    assert is_descendant("/a.txt", "/")
    assert not is_descendant("/", "/")


def test_asset_name_for_uses_forward_slashes(tmp_path) -> None:
    root = tmp_path / "asset"
    file_path = os.path.join(str(root), "css", "site.css")
    assert asset_name_for(file_path, str(root)) == "/css/site.css"


def test_inspect_target(tmp_path) -> None:
    f = tmp_path / "web.py"
    assert inspect_target(str(f)) == (False, False)
    f.write_text("x", encoding="utf-8")
    assert inspect_target(str(f)) == (True, False)
    assert inspect_target(str(tmp_path)) == (True, True)
