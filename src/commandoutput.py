"""Console output for install runs."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable

from command_execution import failed_steps

if TYPE_CHECKING:
    from model import InstallPlan, StepResult


def print_plan(plan: "InstallPlan", dry_run: bool = False) -> None:
    """Print the detected host and every planned command.

    Args:
        plan: The install plan to display
        dry_run: Mark the header so it is clear nothing will execute
    """
    print("=" * 60)
    print("Install plan (dry run):" if dry_run else "Install plan:")
    print(f"  Elevation:    {plan.elevation.mode.value}")
    print(f"  Distribution: {plan.distribution.value}")
    print(f"  Init system:  {plan.init_system.value}")
    print()
    for i, step in enumerate(plan.steps, 1):
        suffix = " (may fail)" if step.optional else ""
        print(f"  {i:2d}. {step.description}{suffix}")
        print(f"      {step.display()}")
    print("=" * 60 + "\n")


def print_stage_header(title: str) -> None:
    print(f"==> {title}")


def print_notes(notes: Iterable[str]) -> None:
    for note in notes:
        print(note)


def print_step_result(result: "StepResult") -> None:
    """Print a one-line result for a completed step."""
    if result.skipped:
        status = "skip"
    elif result.ok:
        status = " ok "
    elif result.step.optional:
        status = "warn"
    else:
        status = "FAIL"
    print(f"  [{status}] {result.step.description}")


def print_failure_summary(results: list["StepResult"]) -> None:
    """Print failed required steps with their diagnostics to stderr."""
    failures = failed_steps(results)
    if not failures:
        return
    print("=" * 60, file=sys.stderr)
    print(f"{len(failures)} step(s) did not complete:", file=sys.stderr)
    print("", file=sys.stderr)
    for r in failures:
        print(f"  {r.step.description}: {r.diagnostic}", file=sys.stderr)
        if not r.skipped:
            print(f"    {r.step.display()}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
