"""Debian and Ubuntu install sequences (apt + Docker's apt repository)."""

from command_execution import query_output
from config import APT_SOURCE_LIST, DOCKER_DOWNLOAD_URL, KEYRING_DIR, KEYRING_PATH
from distro.base import DistroConfig
from distro.detector import register_distro
from model import Distribution, Elevation, Step

APT_CONFLICTING_PACKAGES = ["docker", "docker-engine", "docker.io", "containerd", "runc"]
APT_PREREQUISITES = ["ca-certificates", "curl", "gnupg", "lsb-release"]
APT_DOCKER_PACKAGES = [
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
    "docker-compose",
]


@register_distro
class DebianDistro(DistroConfig):
    """Configuration for Debian."""

    distribution = Distribution.DEBIAN
    package_manager = "apt"
    repo_id = "debian"  # Path component under download.docker.com/linux/

    def get_architecture(self) -> str:
        return query_output(["dpkg", "--print-architecture"])

    def get_codename(self) -> str:
        return query_output(["lsb_release", "-cs"])

    def source_line(self) -> str:
        """Build the apt source entry for Docker's repository."""
        return (
            f"deb [arch={self.get_architecture()} signed-by={KEYRING_PATH}] "
            f"{DOCKER_DOWNLOAD_URL}/{self.repo_id} {self.get_codename()} stable\n"
        )

    def package_steps(self, elevation: Elevation) -> list[Step]:
        wrap = elevation.wrap
        return [
            Step(
                "Remove old Docker packages",
                wrap(["apt-get", "remove", "-y", *APT_CONFLICTING_PACKAGES]),
                optional=True,
            ),
            Step("Update apt package index", wrap(["apt-get", "update"])),
            Step(
                "Install repository prerequisites",
                wrap(["apt-get", "install", "-y", *APT_PREREQUISITES]),
            ),
            Step(
                "Create keyring directory",
                wrap(["mkdir", "-m", "0755", "-p", KEYRING_DIR]),
            ),
            Step(
                "Add Docker's GPG key",
                wrap(["gpg", "--dearmor", "-o", KEYRING_PATH]),
                pipe_from=("curl", "-fsSL", f"{DOCKER_DOWNLOAD_URL}/{self.repo_id}/gpg"),
            ),
            Step(
                "Add Docker apt repository",
                wrap(["tee", APT_SOURCE_LIST]),
                stdin=self.source_line(),
            ),
            Step("Update apt package index", wrap(["apt-get", "update"])),
            Step(
                "Install Docker Engine, containerd and Docker Compose",
                wrap(["apt-get", "install", "-y", *APT_DOCKER_PACKAGES]),
            ),
        ]


@register_distro
class UbuntuDistro(DebianDistro):
    """Configuration for Ubuntu. Same sequence against the ubuntu repository."""

    distribution = Distribution.UBUNTU
    repo_id = "ubuntu"
