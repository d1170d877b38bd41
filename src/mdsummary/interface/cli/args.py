from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from mdsummary.domain.constants import APP_NAME, SUMMARY_FILE_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mdsummary CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Generate a navigable SUMMARY of a markdown documentation tree, "
            "titled from the content of each file."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Root directory of the documentation (default: current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=f"Write the document to this file (e.g. docs/{SUMMARY_FILE_NAME}) "
             f"instead of stdout.",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace the output file if it already exists.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan and render without writing the output file.",
    )
    p.add_argument(
        "--print-summary",
        action="store_true",
        help="Also log the rendered document.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Load configuration from this JSON file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any persisted configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left as None mean "not given on the command line".

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["log_file"] = args.log_file

    if args.print_summary:
        overrides["print_summary"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
