"""Alpine Linux install sequence."""

from distro.base import DistroConfig
from distro.detector import register_distro
from model import Distribution, Elevation, Step


@register_distro
class AlpineDistro(DistroConfig):
    """Configuration for Alpine Linux."""

    distribution = Distribution.ALPINE
    package_manager = "apk"

    def package_steps(self, elevation: Elevation) -> list[Step]:
        # Both packages live in the community repository
        return [
            Step(
                "Install Docker and Docker Compose",
                elevation.wrap(["apk", "add", "docker", "docker-compose"]),
            ),
        ]
