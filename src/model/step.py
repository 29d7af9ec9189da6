"""External command steps and their results."""

import shlex
from dataclasses import dataclass


@dataclass(frozen=True)
class Step:
    """One blocking external command in an install plan.

    pipe_from, when set, is run first and its stdout becomes this step's
    stdin (the `curl ... | gpg --dearmor` pattern). stdin is literal text fed
    to the command (the `echo ... | tee` pattern). Optional steps are
    expected to fail on some hosts and never halt a run.
    """

    description: str
    argv: tuple[str, ...]
    stdin: str | None = None
    pipe_from: tuple[str, ...] | None = None
    optional: bool = False

    def display(self) -> str:
        """Shell-style rendering of the command, for logs and the TUI."""
        cmd = shlex.join(self.argv)
        if self.pipe_from:
            return f"{shlex.join(self.pipe_from)} | {cmd}"
        if self.stdin is not None:
            return f"echo {shlex.quote(self.stdin.rstrip())} | {cmd}"
        return cmd


@dataclass(frozen=True)
class StepResult:
    """Observable result of running (or skipping) a step."""

    step: Step
    returncode: int
    stdout: str = ""
    stderr: str = ""
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.skipped and self.returncode == 0

    @property
    def diagnostic(self) -> str:
        """Short reason for a failure, empty on success."""
        if self.skipped:
            return "skipped after an earlier failure"
        if self.returncode == 0:
            return ""
        detail = self.stderr.strip().splitlines()
        if detail:
            return f"exit {self.returncode}: {detail[-1]}"
        return f"exit {self.returncode}"
