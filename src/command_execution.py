"""Blocking execution of install steps."""

from __future__ import annotations

import logging
import subprocess
from typing import Iterable

from model import Step, StepResult

log = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127
# Shell convention for "found but could not be executed"
COMMAND_NOT_EXECUTABLE = 126


def _run(argv: tuple[str, ...] | list[str], stdin: str | None) -> subprocess.CompletedProcess:
    return subprocess.run(
        list(argv),
        input=stdin,
        capture_output=True,
        text=True,
        errors="replace",
    )


def query_output(argv: list[str]) -> str:
    """Run a read-only helper command and return its stripped stdout.

    Used while building a plan (e.g. `dpkg --print-architecture`). Failures
    are logged and yield an empty string so planning can continue.
    """
    try:
        result = _run(argv, None)
    except OSError as e:
        log.warning(f"Helper command could not start: {argv[0]}: {e}")
        return ""
    if result.returncode != 0:
        log.warning(f"Helper command failed ({result.returncode}): {' '.join(argv)}")
        return ""
    return result.stdout.strip()


def run_step(step: Step, dry_run: bool = False) -> StepResult:
    """Run one step to completion and capture its result.

    Never raises for command failures: a missing executable is reported
    with return code 127 and any other start failure with 126, like a shell
    would. Undecodable output bytes are replaced rather than raising.
    """
    log.info(f"CMD {step.display()}")
    if dry_run:
        return StepResult(step=step, returncode=0)

    try:
        stdin = step.stdin
        if step.pipe_from:
            source = _run(step.pipe_from, None)
            if source.returncode != 0:
                log.debug(f"STDERR {source.stderr.strip()}")
                return StepResult(
                    step=step,
                    returncode=source.returncode,
                    stdout=source.stdout,
                    stderr=source.stderr,
                )
            stdin = source.stdout
        proc = _run(step.argv, stdin)
    except FileNotFoundError as e:
        log.error(f"Command not found: {e}")
        return StepResult(step=step, returncode=COMMAND_NOT_FOUND, stderr=str(e))
    except OSError as e:
        log.error(f"Command could not start: {e}")
        return StepResult(step=step, returncode=COMMAND_NOT_EXECUTABLE, stderr=str(e))

    if proc.stdout:
        log.debug(f"STDOUT {proc.stdout.strip()}")
    if proc.stderr:
        log.debug(f"STDERR {proc.stderr.strip()}")
    if proc.returncode != 0:
        level = logging.INFO if step.optional else logging.WARNING
        log.log(level, f"Step failed ({proc.returncode}): {step.description}")

    return StepResult(
        step=step,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )


def run_steps(
    steps: Iterable[Step],
    dry_run: bool = False,
    halt_on_error: bool = False,
    on_result=None,
) -> list[StepResult]:
    """Run steps in order and return one result per step.

    By default every step runs even if an earlier one failed. With
    halt_on_error the first failed non-optional step stops the sequence and
    the remaining steps are returned as skipped.

    Args:
        steps: Steps in execution order
        dry_run: Log commands without executing them
        halt_on_error: Stop after the first non-optional failure
        on_result: Optional callback invoked with each StepResult as it completes
    """
    results: list[StepResult] = []
    stopped = False
    for step in steps:
        if stopped:
            result = StepResult(step=step, returncode=0, skipped=True)
        else:
            result = run_step(step, dry_run=dry_run)
            if halt_on_error and not result.ok and not step.optional:
                log.error(f"Halting after failed step: {step.description}")
                stopped = True
        results.append(result)
        if on_result is not None:
            on_result(result)
    return results


def failed_steps(results: list[StepResult]) -> list[StepResult]:
    """Return results of required steps that failed or were skipped."""
    return [r for r in results if not r.ok and not r.step.optional]
