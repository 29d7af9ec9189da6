"""Install plan and post-install outcome."""

from dataclasses import dataclass

from model.host import Distribution, Elevation, InitSystem
from model.step import Step


@dataclass(frozen=True)
class InstallPlan:
    """Everything a run will do, built before any command executes."""

    elevation: Elevation
    distribution: Distribution
    init_system: InitSystem
    package_steps: tuple[Step, ...] = ()
    service_steps: tuple[Step, ...] = ()
    group_steps: tuple[Step, ...] = ()
    service_notes: tuple[str, ...] = ()  # Printed when no service steps could be planned
    group_notes: tuple[str, ...] = ()  # Printed when no group steps could be planned

    @property
    def steps(self) -> tuple[Step, ...]:
        """All steps in execution order."""
        return self.package_steps + self.service_steps + self.group_steps


@dataclass(frozen=True)
class InstallationOutcome:
    """Final observable state: which executables resolve on PATH.

    Says nothing about whether individual steps succeeded.
    """

    runtime_present: bool
    compose_present: bool

    @property
    def complete(self) -> bool:
        return self.runtime_present and self.compose_present
