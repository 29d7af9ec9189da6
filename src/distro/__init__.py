"""Distribution-specific install module.

This module classifies the host distribution from marker files and maps it
to a fixed package-manager sequence.

Usage:
    from distro import detect_distribution, get_distro_config

    distribution = detect_distribution()
    for step in get_distro_config(distribution).package_steps(elevation):
        print(step.display())
"""

# Import distro modules to trigger registration
from distro import (  # noqa: F401
    alpine,
    arch,
    debian,
    fedora,
)
from distro.base import DistroConfig
from distro.detector import (
    detect_distribution,
    get_distro_config,
    list_supported_distros,
    read_lsb_distributor_id,
)

__all__ = [
    "DistroConfig",
    "detect_distribution",
    "get_distro_config",
    "list_supported_distros",
    "read_lsb_distributor_id",
]
