from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted file, command-line overrides), pipeline execution and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mdsummary.core.pipeline.engine import run_pipeline
from mdsummary.core.pipeline.writer import write_to_stream
from mdsummary.core.pipeline.validator import validate_config
from mdsummary.domain.config import get_default_config, load_config
from mdsummary.domain.summary_models import SummaryResult
from mdsummary.infra.logging import LoggingConfig, configure_logging, get_logger
from mdsummary.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    logger.debug("CLI execution initiated.")

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.exists(input_path):
        msg = f"Input path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Pipeline execution phase
    logger.info(f"Targeting input directory: {input_path}")
    try:
        result = run_pipeline(
            clean_conf,
            overwrite=bool(args.overwrite),
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 6. Output rendering phase
    if args.json_output:
        _emit_stdout(json.dumps(asdict(result), ensure_ascii=False, indent=2) + "\n")
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of the overrides that were actually given (not None).
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: SummaryResult) -> None:
    """
    Print the outcome of a run.

    Without an output file the document itself is the output. With one,
    only a short report is printed.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if not result.output_path:
        _emit_stdout(result.document)
        return

    if result.dry_run:
        print("SIMULATION COMPLETE")
        print(f"Target file: {result.output_path}")
        print(f"Entries: {result.entry_count}")
        return

    print(f"Summary written to: {result.output_path}")
    print(f"Entries: {result.entry_count}")


def _emit_stdout(text: str) -> None:
    """Write text to stdout as bytes, keeping undecodable file names intact."""
    sys.stdout.flush()
    write_to_stream(sys.stdout.buffer, text)


if __name__ == "__main__":
    sys.exit(main())
