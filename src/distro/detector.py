"""Distribution detection and registry."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from command_execution import query_output
from errors import UnsupportedDistribution
from model import Distribution

if TYPE_CHECKING:
    from distro.base import DistroConfig

log = logging.getLogger(__name__)

# Registry of all distribution configs
_distro_registry: dict[Distribution, type["DistroConfig"]] = {}


def register_distro(cls: type["DistroConfig"]) -> type["DistroConfig"]:
    """Decorator to register a distribution config class.

    Args:
        cls: The DistroConfig subclass to register

    Returns:
        The same class (unchanged)
    """
    _distro_registry[cls.distribution] = cls
    return cls


HOST_LSB_RELEASE = Path("/etc/lsb-release")


def read_lsb_distributor_id(marker: Path, use_command: bool = True) -> str:
    """Get the distributor name on an lsb-release system.

    Prefers `lsb_release -si`; falls back to DISTRIB_ID in the marker file
    when the command is missing or prints nothing. use_command=False reads
    only the file, for markers under a root other than the running host.
    """
    if use_command and shutil.which("lsb_release"):
        name = query_output(["lsb_release", "-si"])
        if name:
            return name

    try:
        for line in marker.read_text().splitlines():
            if line.startswith("DISTRIB_ID="):
                return line.split("=", 1)[1].strip().strip('"')
    except OSError as e:
        log.warning(f"Could not read {marker}: {e}")
    return ""


def _from_lsb_release(marker: Path) -> Distribution:
    # lsb_release describes the running host, not a probed root
    name = read_lsb_distributor_id(marker, use_command=marker == HOST_LSB_RELEASE)
    distribution = Distribution.from_name(name)
    if distribution is Distribution.UNSUPPORTED:
        raise UnsupportedDistribution(name or None)
    return distribution


# Probed in order, first match wins. Debian's marker comes before the
# generic lsb-release one, so Debian derivatives carrying both stay Debian.
MARKER_PROBES: list[tuple[str, Callable[[Path], Distribution]]] = [
    ("etc/debian_version", lambda _: Distribution.DEBIAN),
    ("etc/lsb-release", _from_lsb_release),
    ("etc/fedora-release", lambda _: Distribution.FEDORA),
    ("etc/arch-release", lambda _: Distribution.ARCH),
    ("etc/alpine-release", lambda _: Distribution.ALPINE),
]


def detect_distribution(root: Path = Path("/")) -> Distribution:
    """Classify the host from its distribution marker files.

    Args:
        root: Filesystem root the marker paths are relative to

    Returns:
        The first matching supported Distribution

    Raises:
        UnsupportedDistribution: no marker matched, or lsb-release named an
            unsupported distribution
    """
    for relative, classify in MARKER_PROBES:
        marker = root / relative
        if marker.is_file():
            distribution = classify(marker)
            log.info(f"Detected {distribution.value} from {marker}")
            return distribution

    raise UnsupportedDistribution()


def get_distro_config(distribution: Distribution) -> "DistroConfig":
    """Get the install configuration for a classified distribution.

    Raises:
        UnsupportedDistribution: for UNSUPPORTED or an unregistered value
    """
    cls = _distro_registry.get(distribution)
    if cls is None:
        raise UnsupportedDistribution(distribution.value)
    return cls()


def list_supported_distros() -> list[str]:
    """Get list of supported distribution names, sorted."""
    return sorted(d.value for d in _distro_registry)
