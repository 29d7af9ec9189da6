"""Widgets for the plan review screen."""

from __future__ import annotations

from textual.widgets import Static

from model import Step


class StepItem(Static):
    """One numbered step of the install plan.

    Commands are shown verbatim, so markup is disabled.
    """

    def __init__(self, index: int, step: Step) -> None:
        note = " (may fail)" if step.optional else ""
        super().__init__(
            f"{index:2d}. {step.description}{note}\n    {step.display()}",
            markup=False,
        )
        self.step = step
        self.add_class("step-item")
        if step.optional:
            self.add_class("optional")


def format_host_summary(elevation: str, distribution: str, init_system: str) -> str:
    """Text for the detected-host panel."""
    return (
        f"Elevation:    {elevation}\n"
        f"Distribution: {distribution}\n"
        f"Init system:  {init_system}"
    )
