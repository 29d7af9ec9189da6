"""Base class for distribution-specific install sequences."""

from abc import ABC, abstractmethod
from typing import ClassVar

from model import Distribution, Elevation, Step


class DistroConfig(ABC):
    """Abstract base class for distribution-specific configuration.

    Each subclass hardcodes the full package-manager sequence that installs
    the container runtime and compose tooling on its distribution.
    """

    distribution: ClassVar[Distribution]
    package_manager: ClassVar[str]  # Package manager name (e.g., "dnf")

    @property
    def name(self) -> str:
        return self.distribution.value

    @abstractmethod
    def package_steps(self, elevation: Elevation) -> list[Step]:
        """Get the install sequence for this distribution.

        Args:
            elevation: Prefix applied to privileged commands

        Returns:
            Steps in execution order: conflicting package removal, repository
            bootstrap, index refresh, package installation (as applicable)
        """
        ...
