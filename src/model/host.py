"""Host classification values produced by the detectors."""

from dataclasses import dataclass
from enum import Enum


class ElevationMode(Enum):
    """How privileged commands get superuser rights."""

    NONE = "none"  # Already root
    SUDO = "sudo"
    DOAS = "doas"


@dataclass(frozen=True)
class Elevation:
    """Resolved elevation prefix, prepended to every privileged command."""

    mode: ElevationMode
    prefix: tuple[str, ...] = ()

    def wrap(self, argv: list[str]) -> tuple[str, ...]:
        """Return argv with the elevation prefix prepended."""
        return (*self.prefix, *argv)

    @property
    def is_root(self) -> bool:
        return self.mode is ElevationMode.NONE


class Distribution(Enum):
    """Supported Linux distributions.

    Values match the names printed by `lsb_release -si`.
    """

    DEBIAN = "Debian"
    UBUNTU = "Ubuntu"
    FEDORA = "Fedora"
    ARCH = "Arch"
    ALPINE = "Alpine"
    UNSUPPORTED = "Unsupported"

    @classmethod
    def from_name(cls, name: str) -> "Distribution":
        """Map a distributor name onto a member, UNSUPPORTED if unknown."""
        for member in cls:
            if member is not cls.UNSUPPORTED and member.value == name:
                return member
        return cls.UNSUPPORTED


class InitSystem(Enum):
    """Init systems the service enabler knows how to drive."""

    SYSTEMD = "systemd"
    OPENRC = "openrc"
    UNKNOWN = "unknown"
