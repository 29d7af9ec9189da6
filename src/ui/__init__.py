"""UI module containing widgets and IDs for the plan review screen."""

from ui.widgets import StepItem, format_host_summary
from ui import ids

__all__ = [
    "StepItem",
    "format_host_summary",
    "ids",
]
