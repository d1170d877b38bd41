from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the pipeline engine to the interface
layer, plus the factory functions used to build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SummaryResult:
    """
    Unified result of a complete summary generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized root directory that was scanned.
        output_path: Destination file ("" when the document goes to stdout).
        document: The rendered SUMMARY text ("" on failure).
        entry_count: Number of list entries emitted in the document.
        failed_path: Path that aborted the scan, if any.
        dry_run: Whether the run skipped writing to disk.
        written: Whether the document was persisted to output_path.
        summary: Execution metrics for reporting.
    """
    ok: bool
    error: str

    base_path: str
    output_path: str

    document: str = ""
    entry_count: int = 0
    failed_path: str = ""

    dry_run: bool = False
    written: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        base_path: str,
        output_path: str = "",
        failed_path: str = "",
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SummaryResult:
    """
    Create a failed result instance. No document is attached.

    Args:
        error: Detailed error description.
        base_path: The target input directory.
        output_path: Configured destination file.
        failed_path: Filesystem entry responsible for the failure.
        dry_run: Whether the run was a simulation.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        SummaryResult: An immutable error result object.
    """
    return SummaryResult(
        ok=False,
        error=error,
        base_path=base_path,
        output_path=output_path,
        failed_path=failed_path,
        dry_run=dry_run,
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        output_path: str,
        document: str,
        entry_count: int,
        dry_run: bool = False,
        written: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> SummaryResult:
    """
    Create a successful result instance.

    Args:
        base_path: Normalized input directory.
        output_path: Destination file ("" for stdout).
        document: Rendered SUMMARY text.
        entry_count: Number of emitted list entries.
        dry_run: Whether disk writes were skipped.
        written: Whether the document reached output_path.
        summary_extra: Final execution metrics.

    Returns:
        SummaryResult: An immutable success result object.
    """
    return SummaryResult(
        ok=True,
        error="",
        base_path=base_path,
        output_path=output_path,
        document=document,
        entry_count=entry_count,
        dry_run=dry_run,
        written=written,
        summary=summary_extra or {},
    )
