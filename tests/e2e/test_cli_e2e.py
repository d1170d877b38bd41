from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stream output and file side effects.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "mdsummary" / "main.py"

EXPECTED_SAMPLE = (
    "# SUMMARY\n"
    "\n"
    "- [Files section](./files/landing.md)\n"
    "    - [Title 1](./files/file1.md)\n"
    "    - [Title 2](./files/file2.md)\n"
)


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH and an
    isolated home directory so no persisted configuration leaks in.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_document_printed_to_stdout(tmp_path: Path, sample_docs: Path) -> None:
    result = run_cli(["-i", str(sample_docs)], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == EXPECTED_SAMPLE


def test_document_written_to_file(tmp_path: Path, sample_docs: Path) -> None:
    out = tmp_path / "site" / "SUMMARY.md"
    result = run_cli(["-i", str(sample_docs), "-o", str(out)], tmp_path)

    assert result.returncode == 0, result.stderr
    assert out.read_text(encoding="utf-8") == EXPECTED_SAMPLE
    assert "Entries: 3" in result.stdout


def test_existing_output_requires_overwrite(tmp_path: Path, sample_docs: Path) -> None:
    out = tmp_path / "SUMMARY.md"
    out.write_text("old", encoding="utf-8")

    refused = run_cli(["-i", str(sample_docs), "-o", str(out)], tmp_path)
    assert refused.returncode == 1
    assert "already exists" in refused.stderr

    allowed = run_cli(["-i", str(sample_docs), "-o", str(out), "--overwrite"], tmp_path)
    assert allowed.returncode == 0
    assert out.read_text(encoding="utf-8") == EXPECTED_SAMPLE


def test_missing_input_exit_code(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "nope")], tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_json_output(tmp_path: Path, sample_docs: Path) -> None:
    result = run_cli(["-i", str(sample_docs), "--json"], tmp_path)

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["entry_count"] == 3
    assert payload["document"] == EXPECTED_SAMPLE


def test_dry_run_simulation(tmp_path: Path, sample_docs: Path) -> None:
    out = tmp_path / "dry" / "SUMMARY.md"
    result = run_cli(["-i", str(sample_docs), "-o", str(out), "--dry-run"], tmp_path)

    assert result.returncode == 0
    assert "SIMULATION COMPLETE" in result.stdout
    assert not out.exists()


def test_dump_config_uses_config_file(tmp_path: Path, sample_docs: Path) -> None:
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"input_path": str(sample_docs), "print_summary": True}),
                   encoding="utf-8")

    result = run_cli(["--config", str(cfg), "--dump-config"], tmp_path)

    assert result.returncode == 0, result.stderr
    dumped = json.loads(result.stdout)
    assert dumped["input_path"] == str(sample_docs)
    assert dumped["print_summary"] is True


def test_undecodable_file_name_printed_to_stdout(tmp_path: Path, sample_docs: Path) -> None:
    sub = os.path.join(os.fsencode(str(sample_docs)), b"files")
    try:
        with open(os.path.join(sub, b"\xff.md"), "wb") as f:
            f.write(b"")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")

    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(tmp_path)

    result = subprocess.run(
        [sys.executable, str(ENTRY_POINT), "-i", str(sample_docs)],
        env=env,
        capture_output=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.endswith(b"    - [\xff.md](./files/\xff.md)\n")
