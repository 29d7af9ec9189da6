"""Model classes for dockstrap."""

from model.host import Distribution, Elevation, ElevationMode, InitSystem
from model.step import Step, StepResult
from model.outcome import InstallationOutcome, InstallPlan

__all__ = [
    "Distribution",
    "Elevation",
    "ElevationMode",
    "InitSystem",
    "Step",
    "StepResult",
    "InstallationOutcome",
    "InstallPlan",
]
