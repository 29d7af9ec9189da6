"""Exceptions that abort a dockstrap run."""


class DockstrapError(Exception):
    """Base class for fatal install conditions."""


class MissingElevationTool(DockstrapError):
    """Raised when a non-root user has neither sudo nor doas."""

    def __init__(self, candidates: tuple[str, ...]) -> None:
        super().__init__(f"This script requires {' or '.join(candidates)} to run.")
        self.candidates = candidates


class UnsupportedDistribution(DockstrapError):
    """Raised when no distribution marker matches, or the name is unknown."""

    def __init__(self, name: str | None = None) -> None:
        message = "Unsupported distribution"
        if name:
            message = f"{message}: {name}"
        super().__init__(message)
        self.name = name
