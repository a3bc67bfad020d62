"""Sampling runner CLI.

This module provides a command-line interface for drawing uniform random
numbers and recording each run in its own directory.

Supports two modes:
- single: Draw one sample set, write samples, summary, plots and a report
- checks: Run the sanity/distribution check suite and produce a report

Config precedence (later wins): built-in defaults, --config JSON file,
explicit CLI flags, --set key=value overrides.

Usage:
    python -m sampling.runner --n 10 --min 1 --max 10 --seed 123
    python -m sampling.runner --mode checks --repeats 5000
    python -m sampling.runner --config run.json --set n=50
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from core.logging import configure_logging, get_logger
from core.rng import make_rng
from randomizer.random_numbers import random_numbers
from sampling.checks import run_checks
from sampling.config import (
    DEFAULT_CONFIG,
    apply_overrides,
    load_json,
    merge_config,
    validate_run_config,
)
from sampling.metrics import fraction_in_range, summarize, uniform_ks_statistic
from sampling.plotting import plot_samples
from sampling.report import (
    render_checks_markdown,
    render_run_readme,
    render_single_run_report_md,
)
from sampling.workflow import (
    next_run_dir,
    try_get_git_commit,
    write_json,
    write_run_files,
    write_samples_csv,
)

__all__ = ["main", "parse_args", "build_config", "run_single_mode", "run_checks_mode"]

logger = get_logger("sampling.runner")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Draw uniform random numbers and record the run",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--mode",
        type=str,
        choices=["single", "checks"],
        default="single",
        help="Run mode: one sample set, or the checks suite",
    )
    parser.add_argument(
        "--workflow-dir",
        type=str,
        default="workflow",
        help="Directory for run outputs",
    )

    # Sampling (None means "not given", so file config and defaults apply)
    parser.add_argument("--n", type=float, default=None, help="Number of values to draw")
    parser.add_argument("--min", type=float, default=None, help="Lower bound")
    parser.add_argument("--max", type=float, default=None, help="Upper bound")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--bins", type=int, default=None, help="Histogram bins")
    parser.add_argument(
        "--repeats", type=int, default=None, help="Sample size for the uniformity check"
    )
    parser.add_argument(
        "--ks-threshold", type=float, default=None, help="Max KS statistic for uniformity"
    )

    # Config
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Config override (repeatable)",
    )

    # Output
    parser.add_argument(
        "--no-render", action="store_true", help="Skip plots and the Markdown report"
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")

    return parser.parse_args(argv)


def _cli_value(value: float | None) -> float | int | None:
    # argparse gives floats; keep whole numbers as ints so n=5 stays 5
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_config(args: argparse.Namespace) -> dict[str, Any]:
    """Build the resolved config from defaults, file, flags and overrides.

    Raises:
        FileNotFoundError: If --config points to a missing file.
        ValueError: If the config file or an override is malformed.
    """
    file_config = load_json(Path(args.config)) if args.config else None
    flags = {
        "n": _cli_value(args.n),
        "min": args.min,
        "max": args.max,
        "seed": args.seed,
        "bins": args.bins,
        "repeats": args.repeats,
        "ks_threshold": args.ks_threshold,
    }
    config = merge_config(DEFAULT_CONFIG, file_config, flags)
    return apply_overrides(config, list(args.overrides))


def run_single_mode(
    config: dict[str, Any], run_dir: Path, *, render: bool = True
) -> dict[str, Any]:
    """Draw one sample set and write its artifacts.

    Writes:
    - artifacts/samples.csv
    - artifacts/summary.json
    - artifacts/plots/*.png and artifacts/report.md (if render)

    Returns:
        The summary dictionary.
    """
    artifacts_dir = run_dir / "artifacts"
    low, high = config["min"], config["max"]

    values = random_numbers(config["n"], low, high, rng=make_rng(config["seed"]))
    write_samples_csv(artifacts_dir / "samples.csv", values)

    summary: dict[str, Any] = {
        "n": config["n"],
        "min": low,
        "max": high,
        "seed": config["seed"],
    }
    summary.update(summarize(values).to_dict())
    summary["fraction_in_range"] = fraction_in_range(values, low, high)
    summary["ks_statistic"] = uniform_ks_statistic(values, low, high)
    write_json(artifacts_dir / "summary.json", summary)

    if render:
        plots = plot_samples(values, artifacts_dir, low=low, high=high, bins=config["bins"])
        report = render_single_run_report_md(run_dir, summary=summary, plots=plots)
        with (artifacts_dir / "report.md").open("w", encoding="utf-8") as f:
            f.write(report)

    logger.info("Wrote %d samples to %s", len(values), artifacts_dir)
    return summary


def run_checks_mode(config: dict[str, Any], run_dir: Path) -> tuple[dict[str, Any], bool]:
    """Run the check suite and write checks.json and checks.md.

    Returns:
        Tuple of (summary JSON dict, all checks passed).
    """
    artifacts_dir = run_dir / "artifacts"
    summary = run_checks(config)
    summary_json = summary.to_json()
    write_json(artifacts_dir / "checks.json", summary_json)
    with (artifacts_dir / "checks.md").open("w", encoding="utf-8") as f:
        f.write(render_checks_markdown(summary, config))
    for result in summary.results:
        logger.info("check %s: %s", result.name, "passed" if result.passed else "FAILED")
    return summary_json, summary.passed


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the sampling runner.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for invalid arguments, 2 for checks failure).
    """
    args = parse_args(argv)

    try:
        configure_logging(args.log_level)
        config = build_config(args)
        validate_run_config(config)
    except (TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    run_dir = next_run_dir(Path(args.workflow_dir))
    print(f"Created run directory: {run_dir}")

    checks_passed = True
    if args.mode == "single":
        summary = run_single_mode(config, run_dir, render=not args.no_render)
    else:  # checks mode
        summary, checks_passed = run_checks_mode(config, run_dir)

    meta: dict[str, Any] = {
        "created_at": datetime.now(UTC).isoformat(),
        "argv": sys.argv if argv is None else ["runner"] + list(argv),
        "mode": args.mode,
    }
    git_commit = try_get_git_commit()
    if git_commit:
        meta["git_commit"] = git_commit
    write_run_files(
        run_dir,
        meta=meta,
        config=config,
        readme_text=render_run_readme(run_dir, args.mode, config),
    )

    if args.mode == "single":
        print(f"Run completed: {run_dir.name}")
        print(f"  count: {summary['count']}")
        print(f"  mean: {summary['mean']:.6f}")
        print(f"  observed_range: [{summary['minimum']:.6f}, {summary['maximum']:.6f}]")
        print(f"  ks_statistic: {summary['ks_statistic']:.6f}")
        print(f"  samples.csv: {run_dir / 'artifacts' / 'samples.csv'}")
    else:
        status = "✅ PASSED" if checks_passed else "❌ FAILED"
        print(f"Checks completed: {run_dir.name}")
        print(f"  status: {status}")
        print(f"  num_checks: {summary['num_checks']}")
        print(f"  num_passed: {summary['num_passed']}")
        print(f"  num_failed: {summary['num_failed']}")
        print(f"  checks.md: {run_dir / 'artifacts' / 'checks.md'}")

        # Return exit code 2 if checks failed (for CI)
        if not checks_passed:
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
