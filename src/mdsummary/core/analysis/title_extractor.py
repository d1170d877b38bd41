from __future__ import annotations

"""
Title Extractor.

Infers a human readable title from the first substantive line of a
markdown file, without parsing markdown. Heading markers, emphasis and any
other punctuation outside a small whitelist are stripped away.
"""

import logging
import os
from typing import Optional

from mdsummary.domain.constants import TITLE_FORBIDDEN_CHARS

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_title(file_path: str) -> Optional[str]:
    """
    Return the cleaned text of the first line that survives filtering.

    The file is read lazily, line by line, and closed as soon as a title is
    found. A file that cannot be opened or read is treated as having no
    title; callers apply their own fallback.

    Args:
        file_path: Path to the markdown file.

    Returns:
        Optional[str]: The inferred title, or None if every line is empty
        after cleaning (or the file is empty or unreadable).
    """
    if not os.path.isfile(file_path):
        return None

    try:
        with open(file_path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
            for line in f:
                title = clean_title_line(line)
                if title:
                    return title
    except OSError as e:
        logger.debug(f"No title available for '{file_path}': {e}")
        return None

    return None


def clean_title_line(line: str) -> str:
    """
    Normalize a raw line into title text.

    Underscores become spaces, the line is trimmed, characters outside the
    whitelist are dropped and the result is trimmed again.

    >>> clean_title_line("## __Getting_started__")
    'Getting started'
    """
    text = line.replace("_", " ").strip()
    text = TITLE_FORBIDDEN_CHARS.sub("", text)
    return text.strip()
