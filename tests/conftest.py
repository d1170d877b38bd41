from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides helpers to materialize markdown trees on disk.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _write_tree(base: Path, layout: Dict[str, Any]) -> None:
    for name, content in layout.items():
        target = base / name
        if isinstance(content, dict):
            target.mkdir()
            _write_tree(target, content)
        else:
            target.write_text(content, encoding="utf-8")


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Return a builder that writes a nested dict as files and folders.

    Dict values are folders, string values are file contents. The tree is
    created under a fresh 'docs' directory which is returned.
    """
    def _build(layout: Dict[str, Any]) -> Path:
        root = tmp_path / "docs"
        root.mkdir()
        _write_tree(root, layout)
        return root

    return _build


@pytest.fixture
def sample_docs(make_tree: Callable[[Dict[str, Any]], Path]) -> Path:
    """
    Documentation tree used across tests.

    Structure:
    /docs
      landing.md        "# Landing page"
      /files
        landing.md      "# Files section"
        file1.md        "# Title 1"
        file2.md        "# Title 2"
    """
    return make_tree({
        "landing.md": "# Landing page\n",
        "files": {
            "landing.md": "# Files section\n",
            "file1.md": "# Title 1\n",
            "file2.md": "# Title 2\n",
        },
    })
