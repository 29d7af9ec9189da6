"""Elevation prefix resolution."""

from __future__ import annotations

import logging
import os
import shutil

from errors import MissingElevationTool
from model import Elevation, ElevationMode

log = logging.getLogger(__name__)

# Probed in priority order; the first one on PATH wins
ELEVATION_TOOLS: tuple[ElevationMode, ...] = (ElevationMode.SUDO, ElevationMode.DOAS)


def is_root() -> bool:
    """Check if the effective user is root."""
    return os.geteuid() == 0


def resolve_elevation() -> Elevation:
    """Pick the command used to run privileged steps.

    Root needs no prefix and never probes for tools. Otherwise sudo is
    preferred over doas.

    Raises:
        MissingElevationTool: non-root and neither tool is on PATH
    """
    if is_root():
        log.info("Running as root, no elevation prefix")
        return Elevation(ElevationMode.NONE)

    for mode in ELEVATION_TOOLS:
        if shutil.which(mode.value):
            log.info(f"Using {mode.value} for privileged commands")
            return Elevation(mode, (mode.value,))

    raise MissingElevationTool(tuple(mode.value for mode in ELEVATION_TOOLS))
