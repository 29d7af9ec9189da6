"""Fedora install sequence (dnf + Docker's rpm repository)."""

from config import DOCKER_DOWNLOAD_URL
from distro.base import DistroConfig
from distro.detector import register_distro
from model import Distribution, Elevation, Step

DNF_LEGACY_PACKAGES = [
    "docker",
    "docker-client",
    "docker-client-latest",
    "docker-common",
    "docker-latest",
    "docker-latest-logrotate",
    "docker-logrotate",
    "docker-selinux",
    "docker-engine-selinux",
    "docker-engine",
]
DNF_DOCKER_PACKAGES = [
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
]


@register_distro
class FedoraDistro(DistroConfig):
    """Configuration for Fedora."""

    distribution = Distribution.FEDORA
    package_manager = "dnf"

    def package_steps(self, elevation: Elevation) -> list[Step]:
        wrap = elevation.wrap
        return [
            Step(
                "Remove old Docker packages",
                wrap(["dnf", "remove", "-y", *DNF_LEGACY_PACKAGES]),
                optional=True,
            ),
            Step(
                "Install dnf-plugins-core",
                wrap(["dnf", "-y", "install", "dnf-plugins-core"]),
            ),
            Step(
                "Add Docker dnf repository",
                wrap([
                    "dnf", "config-manager", "--add-repo",
                    f"{DOCKER_DOWNLOAD_URL}/fedora/docker-ce.repo",
                ]),
            ),
            Step(
                "Install Docker Engine, containerd and Docker Compose",
                wrap(["dnf", "install", "-y", *DNF_DOCKER_PACKAGES]),
            ),
        ]
