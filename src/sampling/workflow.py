"""Run directory management for sampling runs.

This module provides utilities for creating run directories with
consistent naming and writing their metadata and artifacts.
"""

from __future__ import annotations

import csv
import json
import re
import subprocess
from pathlib import Path
from typing import Any

from core.types import SampleVector

__all__ = [
    "next_run_dir",
    "write_run_files",
    "write_json",
    "write_samples_csv",
    "try_get_git_commit",
]

_RUN_DIR_PATTERN = re.compile(r"^run_(\d{4})$")


def next_run_dir(workflow_dir: Path) -> Path:
    """Allocate a fresh ``run_XXXX`` directory for one sampling run.

    The index is one past the highest existing ``run_XXXX`` directory, so
    deleted runs leave gaps instead of being overwritten. The directory and
    its ``artifacts/`` subfolder (samples, summaries, plots, check results)
    are created before returning.

    Args:
        workflow_dir: Parent directory holding all runs (created if missing).

    Returns:
        Path to the new run directory.

    Example:
        >>> next_run_dir(Path("workflow")).name
        'run_0000'
    """
    workflow_dir.mkdir(parents=True, exist_ok=True)
    taken = [-1]
    for path in workflow_dir.glob("run_*"):
        match = _RUN_DIR_PATTERN.match(path.name)
        if match and path.is_dir():
            taken.append(int(match.group(1)))
    index = max(taken) + 1

    # mkdir without exist_ok: an existing run directory is never reused
    while True:
        run_dir = workflow_dir / f"run_{index:04d}"
        try:
            run_dir.mkdir()
        except FileExistsError:
            index += 1
            continue
        (run_dir / "artifacts").mkdir()
        return run_dir


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write ``data`` as indented, key-sorted JSON."""
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)


def write_run_files(
    run_dir: Path,
    *,
    meta: dict[str, Any],
    config: dict[str, Any],
    readme_text: str,
) -> None:
    """Record how a sampling run was produced.

    ``meta.json`` holds provenance (timestamp, argv, mode, git commit),
    ``config.json`` the resolved sampling config (n, bounds, seed, ...), and
    ``README.md`` the human-readable description of the run directory.
    """
    for name, data in (("meta.json", meta), ("config.json", config)):
        write_json(run_dir / name, data)
    (run_dir / "README.md").write_text(readme_text, encoding="utf-8")


def write_samples_csv(path: Path, values: SampleVector) -> None:
    """Write samples as ``index,value`` rows in generation order."""
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["index", "value"])
        for i, value in enumerate(values):
            writer.writerow([i, repr(float(value))])


def try_get_git_commit(cwd: Path | None = None) -> str | None:
    """Return the commit the sampling code was run from, if known.

    Args:
        cwd: Directory to query (defaults to the process working directory).

    Returns:
        The full commit hash, or None outside a git checkout or without git.
    """
    try:
        output = subprocess.check_output(
            ["git", "rev-parse", "HEAD"],
            cwd=cwd,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=5,
        )
    except (subprocess.SubprocessError, OSError):
        return None
    return output.strip() or None
