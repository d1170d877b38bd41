from __future__ import annotations

"""
Unit tests for the tree and scan result models.
"""

import dataclasses

import pytest

from mdsummary.domain.tree_models import (
    FileNode,
    FolderNode,
    by_title,
    scan_failure,
    scan_success,
)


def test_nodes_are_immutable() -> None:
    node = FileNode("a.md", "A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.title = "B"  # type: ignore[misc]


def test_default_equality_is_structural() -> None:
    """Same title alone does not make two nodes equal."""
    assert FileNode("a.md", "Same") != FileNode("b.md", "Same")
    assert FileNode("a.md", "Same") != FolderNode("a.md", "Same")


def test_by_title_sorting_is_stable() -> None:
    first = FileNode("z.md", "Same")
    second = FolderNode("a", "Same")
    ordered = sorted([FileNode("m.md", "Zed"), first, second], key=by_title)
    assert ordered == [first, second, FileNode("m.md", "Zed")]


def test_scan_result_factories() -> None:
    folder = FolderNode("docs", "Docs")
    ok = scan_success(folder)
    assert ok.ok and ok.node is folder and ok.failed_path == ""

    failed = scan_failure("/x/y", "Cannot read directory: denied")
    assert not failed.ok
    assert failed.node is None
    assert failed.failed_path == "/x/y"
