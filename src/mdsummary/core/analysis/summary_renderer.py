from __future__ import annotations

"""
Summary Renderer.

Serializes a scanned documentation tree into the SUMMARY markdown document:
a fixed header followed by one indented list link per visible entry, in
depth-first pre-order. Child order is taken as-is from the tree.
"""

from typing import List

from mdsummary.domain.constants import (
    DOCUMENT_EXTENSION,
    INDENT_STEP,
    LANDING_FILE_NAME,
    LINK_SEPARATOR,
    ROOT_PATH_MARKER,
    SUMMARY_FILE_NAME,
    SUMMARY_HEADER,
)
from mdsummary.domain.tree_models import FileNode, FolderNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_summary(tree: FolderNode) -> str:
    """
    Render the complete SUMMARY document.

    Args:
        tree: Root folder produced by the scanner.

    Returns:
        str: Header, blank line and entry lines, newline terminated.
    """
    return compose_document(render_entries(tree))


def compose_document(entries: List[str]) -> str:
    """Prefix already rendered entry lines with the header."""
    lines = [SUMMARY_HEADER, ""]
    lines.extend(entries)
    return "\n".join(lines) + "\n"


def render_entries(tree: FolderNode) -> List[str]:
    """
    Render only the list entries of the document.

    The root folder and the files sitting directly inside it produce no
    entry. Links are relative to the root, starting with the '.' marker.
    """
    lines: List[str] = []
    _render_node(tree, "", 0, lines)
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_node(node: Node, current_path: str, depth: int, lines: List[str]) -> None:
    """
    Depth-first walk. depth is the distance from the root folder.
    """
    if isinstance(node, FolderNode):
        if depth == 0:
            child_path = ROOT_PATH_MARKER
        else:
            child_path = _join(current_path, node.name)
            lines.append(_format_entry(
                depth, node.title, _join(child_path, LANDING_FILE_NAME)
            ))

        for child in node.children:
            _render_node(child, child_path, depth + 1, lines)
        return

    if isinstance(node, FileNode):
        if depth <= 1 or not _is_listed_file(node.name):
            return
        lines.append(_format_entry(depth, node.title, _join(current_path, node.name)))
        return

    raise TypeError(f"Unsupported node type: {type(node).__name__}")


def _is_listed_file(name: str) -> bool:
    """Landing pages and the summary itself never appear as file entries."""
    if name in (LANDING_FILE_NAME, SUMMARY_FILE_NAME):
        return False
    return name.endswith(DOCUMENT_EXTENSION)


def _format_entry(depth: int, title: str, target: str) -> str:
    indent = " " * ((depth - 1) * INDENT_STEP)
    return f"{indent}- [{title}]({target})"


def _join(base: str, segment: str) -> str:
    return f"{base}{LINK_SEPARATOR}{segment}"
