"""Plan review TUI for dockstrap."""

import logging
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Label, Static

from model import InstallPlan
from ui.ids import (
    CANCEL_BTN,
    FOOTER_BUTTONS,
    HEADER_CONTAINER,
    HEADER_TITLE,
    HOST_SUMMARY,
    INSTALL_BTN,
    STATUS_BAR,
    STEP_LIST,
    css,
)
from ui.widgets import StepItem, format_host_summary

log = logging.getLogger(__name__)

# Load CSS from file (will be inlined by build.py)
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class InstallerTUI(App):
    """TUI for reviewing an install plan before running it."""

    TITLE = "dockstrap"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS  # Loaded from styles.css (inlined during build)

    BINDINGS = [
        Binding("enter", "install", "Install", show=True),
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, plan: InstallPlan, version: str = "0.0", dry_run: bool = False) -> None:
        super().__init__()
        self.plan = plan
        self.version = version
        self.dry_run = dry_run
        self.confirmed = False

    def compose(self) -> ComposeResult:
        log.info(f"compose() called with {len(self.plan.steps)} steps")
        mode = " (dry run)" if self.dry_run else ""
        yield Horizontal(
            Label(f"dockstrap {self.version} - install Docker{mode}", id=HEADER_TITLE),
            id=HEADER_CONTAINER,
        )
        yield Static(
            format_host_summary(
                self.plan.elevation.mode.value,
                self.plan.distribution.value,
                self.plan.init_system.value,
            ),
            id=HOST_SUMMARY,
            markup=False,
        )
        with VerticalScroll(id=STEP_LIST):
            for i, step in enumerate(self.plan.steps, 1):
                yield StepItem(i, step)
            for note in self.plan.service_notes + self.plan.group_notes:
                yield Static(note, classes="step-item", markup=False)
        yield Horizontal(
            Static(f"{len(self.plan.steps)} commands planned", id=STATUS_BAR),
            Button("Install [Enter]", id=INSTALL_BTN, variant="success"),
            Button("Cancel [Esc]", id=CANCEL_BTN, variant="error"),
            id=FOOTER_BUTTONS,
        )

    @on(Button.Pressed, css(INSTALL_BTN))
    def on_install_pressed(self, event: Button.Pressed) -> None:
        """Confirm the plan."""
        self.action_install()

    @on(Button.Pressed, css(CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        """Cancel and exit."""
        self.action_cancel()

    def action_install(self) -> None:
        """Exit and let the caller run the plan."""
        self.confirmed = True
        self.exit()

    def action_cancel(self) -> None:
        """Exit without installing."""
        self.confirmed = False
        self.exit()

    def on_mount(self) -> None:
        self.query_one(css(INSTALL_BTN), Button).focus()
