"""Arch Linux install sequence."""

from distro.base import DistroConfig
from distro.detector import register_distro
from model import Distribution, Elevation, Step


@register_distro
class ArchDistro(DistroConfig):
    """Configuration for Arch Linux. Installs from the default repositories."""

    distribution = Distribution.ARCH
    package_manager = "pacman"

    def package_steps(self, elevation: Elevation) -> list[Step]:
        return [
            Step(
                "Install Docker and Docker Compose",
                elevation.wrap(["pacman", "-S", "--noconfirm", "docker", "docker-compose"]),
            ),
        ]
