from __future__ import annotations

"""
Logging Configuration Models.

Settings the CLI can vary (level, console, optional log file and its
rotation) plus the fixed record formats.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Levels accepted from the config file or --debug
_LEVEL_MAP: Dict[str, int] = {
    name: logging.getLevelName(name) for name in ("DEBUG", "INFO", "WARNING", "ERROR")
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name; unknown names mean INFO.
        console: Emit records on stderr (stdout carries the document).
        log_file: Rotating log file, if any.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2
