"""Markdown report generation for sampling runs and checks.

This module renders single-run summaries and check results as
human-readable Markdown reports with embedded plots.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from sampling.checks import ChecksSummary

__all__ = [
    "render_checks_markdown",
    "render_single_run_report_md",
    "render_run_readme",
]


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


def _configuration_lines(config: dict[str, Any]) -> list[str]:
    return [
        "## Configuration",
        "",
        f"- **Count (n)**: {config.get('n', 'N/A')}",
        f"- **Minimum**: {config.get('min', 'N/A')}",
        f"- **Maximum**: {config.get('max', 'N/A')}",
        f"- **Seed**: {config.get('seed', 'N/A')}",
        "",
    ]


def render_checks_markdown(summary: ChecksSummary, config: dict[str, Any]) -> str:
    """Render checks summary as Markdown.

    Args:
        summary: ChecksSummary from run_checks().
        config: Configuration dictionary.

    Returns:
        Markdown string.
    """
    status = "✅ PASSED" if summary.passed else "❌ FAILED"
    lines: list[str] = [f"# Sampling Check Report ({status})", ""]
    lines.extend(_configuration_lines(config))

    lines.append("## Check Results")
    lines.append("")
    lines.append("| Check | Status | Key Metrics |")
    lines.append("|-------|--------|-------------|")

    for result in summary.results:
        details = result.details
        if details.get("skipped"):
            lines.append(f"| {result.name} | ⏭️ Skipped | {details.get('reason', 'N/A')} |")
            continue

        status_icon = "✅" if result.passed else "❌"
        if result.name == "length":
            metrics = f"expected={details.get('expected')}, actual={details.get('actual')}"
        elif result.name == "within_range":
            metrics = (
                f"fraction={details.get('fraction_in_range', 0):.4f}, "
                f"observed=[{details.get('observed_min', 0):.4f}, "
                f"{details.get('observed_max', 0):.4f}]"
            )
        elif result.name == "reproducible":
            metrics = f"max_abs_diff={details.get('max_abs_diff', 0):.3g}"
        elif result.name == "degenerate_interval":
            metrics = f"value={details.get('value')}"
        elif result.name == "invalid_inputs":
            failures = details.get("failures", [])
            metrics = f"cases={details.get('num_cases')}, failures={len(failures)}"
        elif result.name == "uniformity":
            metrics = (
                f"ks={details.get('ks_statistic', 0):.4f} "
                f"(threshold={details.get('threshold', 0):.2f}, "
                f"repeats={details.get('repeats')})"
            )
        else:
            metrics = ", ".join(f"{k}={_fmt(v)}" for k, v in details.items())
        lines.append(f"| {result.name} | {status_icon} | {metrics} |")

    failed = [r for r in summary.results if not r.passed]
    if failed:
        lines.append("")
        lines.append("## Failures")
        lines.append("")
        for result in failed:
            lines.append(f"### {result.name}")
            lines.append("")
            for key, value in result.details.items():
                lines.append(f"- **{key}**: {_fmt(value)}")
            lines.append("")

    lines.append("")
    return "\n".join(lines)


def render_single_run_report_md(
    run_dir: Path,
    *,
    summary: dict[str, Any],
    plots: dict[str, Path],
) -> str:
    """Render a single run report with embedded plots.

    Args:
        run_dir: Run directory (for computing relative paths).
        summary: Summary dictionary from summary.json.
        plots: Dictionary mapping plot name to absolute path.

    Returns:
        Markdown string with embedded plot images.
    """
    lines: list[str] = ["# Sampling Report", ""]
    lines.extend(_configuration_lines(summary))

    lines.append("## Sample Statistics")
    lines.append("")
    for key in ("count", "minimum", "maximum", "mean", "std", "ks_statistic", "fraction_in_range"):
        if key in summary:
            lines.append(f"- **{key}**: {_fmt(summary[key])}")
    lines.append("")

    if plots:
        lines.append("## Plots")
        lines.append("")
        artifacts_dir = run_dir / "artifacts"
        for name, path in plots.items():
            rel = Path(os.path.relpath(path, artifacts_dir)).as_posix()
            lines.append(f"### {name.capitalize()}")
            lines.append("")
            lines.append(f"![{name}]({rel})")
            lines.append("")

    return "\n".join(lines)


def render_run_readme(run_dir: Path, mode: str, config: dict[str, Any]) -> str:
    """Render the README.md placed at the top of a run directory."""
    lines = [f"# {run_dir.name}", "", f"Mode: `{mode}`", ""]
    lines.extend(_configuration_lines(config))
    lines.append("## Artifacts")
    lines.append("")
    if mode == "single":
        lines.append("- `artifacts/samples.csv`: drawn values in generation order")
        lines.append("- `artifacts/summary.json`: sample statistics")
        lines.append("- `artifacts/report.md`: report with plots")
    else:
        lines.append("- `artifacts/checks.json`: check results")
        lines.append("- `artifacts/checks.md`: check report")
    lines.append("")
    return "\n".join(lines)
