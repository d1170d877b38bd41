from __future__ import annotations

"""
Directory Scanner.

Builds the in-memory documentation tree in a single recursive pass. Every
markdown file gets an inferred title, every folder takes its title from its
landing file, and each folder's children are ordered by title.

Traversal is all-or-nothing: the first directory that cannot be listed
aborts the scan and is reported through a failed ScanResult.
"""

import logging
import os
from typing import List

from mdsummary.core.analysis.title_extractor import extract_title
from mdsummary.domain.constants import DOCUMENT_EXTENSION, LANDING_FILE_NAME
from mdsummary.domain.tree_models import (
    FileNode,
    FolderNode,
    Node,
    ScanResult,
    by_title,
    scan_failure,
    scan_success,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_hierarchy(path: str) -> ScanResult:
    """
    Scan a directory recursively into a FolderNode tree.

    Args:
        path: Root directory of the documentation.

    Returns:
        ScanResult: The root folder on success, or the failing path and
        reason when any directory in the subtree cannot be read.
    """
    root = os.path.abspath(path)
    logger.info(f"Scanning documentation tree at: {root}")

    result = _scan_folder(root)

    if result.ok:
        logger.debug(f"Scan finished: {len(result.node.children)} top-level entries.")
    else:
        logger.error(f"Scan aborted at '{result.failed_path}': {result.error}")

    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _scan_folder(dir_path: str) -> ScanResult:
    """Build the folder node for dir_path, propagating the first failure."""
    name = _base_name(dir_path)

    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        return scan_failure(dir_path, f"Cannot read directory: {e.strerror or e}")

    children: List[Node] = []

    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            return scan_failure(entry.path, f"Cannot inspect entry: {e.strerror or e}")

        if is_dir:
            sub = _scan_folder(entry.path)
            if not sub.ok:
                return sub
            children.append(sub.node)
            continue

        if not is_file:
            logger.debug(f"Skipping special entry: {entry.path}")
            continue

        if not entry.name.endswith(DOCUMENT_EXTENSION):
            logger.debug(f"Skipping non-document file: {entry.path}")
            continue

        title = extract_title(entry.path) or entry.name
        children.append(FileNode(name=entry.name, title=title))

    title = extract_title(os.path.join(dir_path, LANDING_FILE_NAME)) or name

    return scan_success(
        FolderNode(name=name, title=title, children=tuple(sorted(children, key=by_title)))
    )


def _base_name(dir_path: str) -> str:
    """Last path component; the path itself for filesystem roots."""
    return os.path.basename(os.path.normpath(dir_path)) or dir_path
