from __future__ import annotations

"""
Domain Constants.

Fixed naming and rendering conventions shared by the scanner, the title
extractor and the summary renderer.
"""

import re

APP_NAME = "mdsummary"

# -----------------------------------------------------------------------------
# DOCUMENT CONVENTIONS
# -----------------------------------------------------------------------------

DOCUMENT_EXTENSION = ".md"
LANDING_FILE_NAME = "landing.md"
SUMMARY_FILE_NAME = "SUMMARY.md"

# -----------------------------------------------------------------------------
# RENDERING CONVENTIONS
# -----------------------------------------------------------------------------

SUMMARY_HEADER = "# SUMMARY"
INDENT_STEP = 4
ROOT_PATH_MARKER = "."
LINK_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# TITLE INFERENCE
# -----------------------------------------------------------------------------

# Anything outside ASCII letters, digits, space and . , ! ? - +
TITLE_FORBIDDEN_CHARS = re.compile(r"[^A-Za-z0-9 .,!?+\-]")
