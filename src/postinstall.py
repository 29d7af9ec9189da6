"""Post-install group membership for the invoking user."""

from __future__ import annotations

import getpass
import logging
import os
import shutil

from model import Elevation, InitSystem, Step

log = logging.getLogger(__name__)

GROUP_ROOT_MESSAGE = "Run as root. No need to add root to the {group} group."
GROUP_UNKNOWN_INIT_MESSAGE = "Unknown init system."


def get_invoking_user() -> str | None:
    """Get the name of the user who ran the installer."""
    user = os.environ.get("USER")
    if user:
        return user
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return None


def group_add_command(user: str, group: str) -> list[str]:
    """Build the command that adds user to group.

    busybox systems (Alpine) ship addgroup; everything else has usermod.
    """
    if shutil.which("addgroup") and not shutil.which("usermod"):
        return ["addgroup", user, group]
    return ["usermod", "-aG", group, user]


def group_steps(
    elevation: Elevation,
    init_system: InitSystem,
    group: str = "docker",
) -> tuple[list[Step], list[str]]:
    """Plan group membership changes.

    Returns:
        Tuple of (steps, messages). Messages explain why nothing was planned.
    """
    if elevation.is_root:
        return [], [GROUP_ROOT_MESSAGE.format(group=group)]
    if init_system is InitSystem.UNKNOWN:
        return [], [GROUP_UNKNOWN_INIT_MESSAGE]

    user = get_invoking_user()
    if not user:
        log.warning("Could not determine invoking user, skipping group membership")
        return [], []

    return [
        Step(f"Add {user} to the {group} group", elevation.wrap(group_add_command(user, group))),
    ], []
