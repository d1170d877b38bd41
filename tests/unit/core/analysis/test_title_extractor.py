from __future__ import annotations

"""
Unit tests for the Title Extractor.

Verifies first-substantive-line selection, whitelist filtering and the
None outcome for empty or unreadable files.
"""

import os
import re
from pathlib import Path

import pytest

from mdsummary.core.analysis.title_extractor import clean_title_line, extract_title

_WHITELIST = re.compile(r"^[A-Za-z0-9 .,!?+\-]*$")


def _md(tmp_path: Path, content: str, name: str = "doc.md") -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_heading_marker_is_stripped(tmp_path: Path) -> None:
    assert extract_title(_md(tmp_path, "# Landing page\n\nBody text\n")) == "Landing page"


def test_leading_blank_and_symbol_only_lines_are_skipped(tmp_path: Path) -> None:
    content = "\n   \n***\n~~~\n## Real *Title*\nother\n"
    assert extract_title(_md(tmp_path, content)) == "Real Title"


def test_dashes_survive_filtering(tmp_path: Path) -> None:
    """'-' is whitelisted, so a line of dashes is itself a title."""
    assert extract_title(_md(tmp_path, "\n---\n# Heading\n")) == "---"


def test_underscores_become_spaces(tmp_path: Path) -> None:
    assert extract_title(_md(tmp_path, "__setup_guide__\n")) == "setup guide"


def test_whitelisted_punctuation_is_kept(tmp_path: Path) -> None:
    content = "# C++ tips, tricks & more: really?!\n"
    assert extract_title(_md(tmp_path, content)) == "C++ tips, tricks  more really?!"


def test_non_ascii_characters_are_removed(tmp_path: Path) -> None:
    assert extract_title(_md(tmp_path, "# Café résumé\n")) == "Caf rsum"


def test_empty_file_has_no_title(tmp_path: Path) -> None:
    assert extract_title(_md(tmp_path, "")) is None


def test_file_with_only_filtered_lines_has_no_title(tmp_path: Path) -> None:
    assert extract_title(_md(tmp_path, "#\n\n***\n___\n> `[]`\n")) is None


def test_missing_file_has_no_title(tmp_path: Path) -> None:
    assert extract_title(str(tmp_path / "absent.md")) is None


def test_directory_path_has_no_title(tmp_path: Path) -> None:
    assert extract_title(str(tmp_path)) is None


def test_invalid_utf8_does_not_raise(tmp_path: Path) -> None:
    path = tmp_path / "latin1.md"
    path.write_bytes(b"# Caf\xe9 menu\n")
    assert extract_title(str(path)) == "Caf menu"


@pytest.mark.parametrize("raw", [
    "# Title with `code` and [link](http://x.y)",
    "\t## __init__ & <html> {braces} | pipes",
    "ümlaut — dash “quotes”",
])
def test_result_only_contains_whitelisted_characters(raw: str) -> None:
    cleaned = clean_title_line(raw)
    assert _WHITELIST.match(cleaned)
    assert cleaned == cleaned.strip()


def test_lone_carriage_return_does_not_split_line(tmp_path: Path) -> None:
    path = tmp_path / "cr.md"
    path.write_bytes(b"# Foo\rBar\n# Second\n")
    assert extract_title(str(path)) == "FooBar"


def test_crlf_line_endings_are_trimmed(tmp_path: Path) -> None:
    path = tmp_path / "crlf.md"
    path.write_bytes(b"\r\n# Windows title\r\nbody\r\n")
    assert extract_title(str(path)) == "Windows title"


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes unavailable")
def test_named_pipe_has_no_title(tmp_path: Path) -> None:
    fifo = tmp_path / "pipe.md"
    os.mkfifo(fifo)
    assert extract_title(str(fifo)) is None
