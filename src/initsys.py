"""Init system detection and service enablement."""

from __future__ import annotations

import logging
from pathlib import Path

from model import Elevation, InitSystem, Step

log = logging.getLogger(__name__)

SYSTEMD_MARKER = "run/systemd/system"
# Either one identifies OpenRC; openrc-init is only present when it is PID 1
OPENRC_MARKERS = ("sbin/openrc-init", "sbin/openrc")

UNKNOWN_INIT_MESSAGE = "Couldn't detect init system. Please enable and start the service manually."


def detect_init_system(root: Path = Path("/")) -> InitSystem:
    """Classify the init system from its marker paths.

    systemd is probed first; OpenRC only if systemd's marker is absent.
    """
    if (root / SYSTEMD_MARKER).exists():
        return InitSystem.SYSTEMD
    if any((root / marker).exists() for marker in OPENRC_MARKERS):
        return InitSystem.OPENRC
    log.info("No init system marker found")
    return InitSystem.UNKNOWN


def service_steps(init_system: InitSystem, elevation: Elevation, service: str = "docker") -> list[Step]:
    """Get the commands that enable the service at boot and start it now.

    Returns an empty list for an unknown init system; the caller reports
    that manual enablement is needed.
    """
    if init_system is InitSystem.SYSTEMD:
        unit = f"{service}.service"
        return [
            Step(f"Enable {unit}", elevation.wrap(["systemctl", "enable", unit])),
            Step(f"Start {unit}", elevation.wrap(["systemctl", "start", unit])),
        ]
    if init_system is InitSystem.OPENRC:
        return [
            Step(f"Add {service} to boot runlevel", elevation.wrap(["rc-update", "add", service, "boot"])),
            Step(f"Start {service}", elevation.wrap(["service", service, "start"])),
        ]
    return []
