from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a summary run:
1. Validates configuration and normalizes paths.
2. Checks for an existing output file.
3. Scans the documentation tree (all-or-nothing).
4. Renders the SUMMARY document.
5. Writes it to the destination unless running dry.
"""

import logging
import os
from typing import Any, Dict, Optional

from mdsummary.core.analysis.scanner import build_hierarchy
from mdsummary.core.analysis.summary_renderer import compose_document, render_entries
from mdsummary.core.pipeline.validator import validate_config
from mdsummary.core.pipeline.writer import write_document
from mdsummary.domain.summary_models import (
    SummaryResult,
    create_error_result,
    create_success_result,
)
from mdsummary.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
) -> SummaryResult:
    """
    Execute the full summary generation pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, replace an existing output file.
        dry_run: If True, render the document without writing to disk.

    Returns:
        SummaryResult: Status, rendered document and run metrics.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg["input_path"], os.getcwd())
    output_path = normalize_path(cfg["output_path"], "") if cfg["output_path"] else ""

    if not os.path.isdir(base_path):
        msg = f"Invalid input directory: {base_path}"
        logger.error(msg)
        return create_error_result(msg, base_path, output_path, dry_run=dry_run)

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    existed_before = bool(output_path) and os.path.exists(output_path)
    if existed_before and not overwrite and not dry_run:
        msg = f"Output file already exists and overwrite=False: {output_path}"
        logger.warning(msg)
        return create_error_result(
            msg, base_path, output_path,
            summary_extra={"existing_files": [output_path]},
        )

    # -------------------------------------------------------------------------
    # 3) Scan
    # -------------------------------------------------------------------------
    scan = build_hierarchy(base_path)
    if not scan.ok:
        msg = f"Cannot read '{scan.failed_path}': {scan.error}"
        return create_error_result(
            msg, base_path, output_path, failed_path=scan.failed_path, dry_run=dry_run
        )

    # -------------------------------------------------------------------------
    # 4) Render
    # -------------------------------------------------------------------------
    entries = render_entries(scan.node)
    document = compose_document(entries)
    logger.info(f"Rendered {len(entries)} summary entries.")

    if cfg["print_summary"]:
        logger.info("Summary Preview:\n" + document)

    # -------------------------------------------------------------------------
    # 5) Deployment
    # -------------------------------------------------------------------------
    written = False
    if output_path and not dry_run:
        try:
            write_document(output_path, document)
            written = True
            logger.info(f"Summary saved to file: {output_path}")
        except (OSError, UnicodeError) as e:
            msg = f"Failed to write summary to '{output_path}': {e}"
            logger.error(msg)
            return create_error_result(msg, base_path, output_path)
    elif dry_run:
        logger.info("Dry run: Skipping write to destination.")

    summary = {
        "entries": len(entries),
        "top_level_entries": len(scan.node.children),
        "overwritten": existed_before and written,
        "dry_run": dry_run,
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        base_path, output_path, document, len(entries),
        dry_run=dry_run, written=written, summary_extra=summary,
    )
