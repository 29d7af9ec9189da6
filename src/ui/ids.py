"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
HOST_SUMMARY = "host-summary"
STEP_LIST = "step-list"
FOOTER_BUTTONS = "footer-buttons"
STATUS_BAR = "status-bar"

# Buttons
INSTALL_BTN = "install-btn"
CANCEL_BTN = "cancel-btn"
