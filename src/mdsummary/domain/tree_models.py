from __future__ import annotations

"""
Documentation Tree Data Models.

Provides the closed set of node shapes (file and folder) produced by the
directory scanner, together with the result type used to carry scan
outcomes up through the recursion.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Leaf entry of the documentation tree.

    Attributes:
        name: Base name of the file, extension included.
        title: Inferred display text, or the file name when none was found.
    """
    name: str
    title: str


@dataclass(frozen=True)
class FolderNode:
    """
    Directory entry of the documentation tree.

    Attributes:
        name: Base name of the directory.
        title: Title taken from the landing file, or the directory name.
        children: Entries of the directory, sorted by title.
    """
    name: str
    title: str
    children: Tuple["Node", ...] = field(default_factory=tuple)


Node = Union[FileNode, FolderNode]


def by_title(node: Node) -> str:
    """Sort key ordering sibling nodes by their display title."""
    return node.title

# -----------------------------------------------------------------------------
# SCAN OUTCOME
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of scanning one directory level.

    Attributes:
        ok: True when the whole subtree was read.
        node: The built folder node (None on failure).
        error: Description of the filesystem failure.
        failed_path: Path of the entry that could not be read.
    """
    ok: bool
    node: Optional[FolderNode] = None
    error: str = ""
    failed_path: str = ""


def scan_success(node: FolderNode) -> ScanResult:
    return ScanResult(ok=True, node=node)


def scan_failure(path: str, error: str) -> ScanResult:
    return ScanResult(ok=False, error=error, failed_path=path)
