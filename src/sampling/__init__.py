"""Sampling runs, checks and reports.

This package provides utilities for running, recording and analyzing
calls to ``randomizer.random_numbers``:

- config: JSON config loading, overrides and validation
- metrics: Sample statistics and uniformity distance
- checks: Sanity/distribution check suite
- workflow: Run directory management
- report: Markdown report generation
- runner: CLI for sampling runs
"""

from __future__ import annotations

from sampling.checks import CheckResult, ChecksSummary, run_checks
from sampling.metrics import fraction_in_range, summarize, uniform_ks_statistic
from sampling.report import render_checks_markdown, render_single_run_report_md
from sampling.runner import main as run_sampling
from sampling.workflow import next_run_dir, try_get_git_commit, write_run_files

__all__ = [
    # Workflow
    "next_run_dir",
    "write_run_files",
    "try_get_git_commit",
    # Metrics
    "summarize",
    "fraction_in_range",
    "uniform_ks_statistic",
    # Checks
    "CheckResult",
    "ChecksSummary",
    "run_checks",
    # Runner
    "run_sampling",
    # Report
    "render_checks_markdown",
    "render_single_run_report_md",
]
