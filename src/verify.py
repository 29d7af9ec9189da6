"""Post-install presence checks."""

import shutil

from model import InstallationOutcome

SUCCESS_MESSAGE = "Congratulations! Both Docker and Docker Compose are installed!"


def verify_installation(runtime: str = "docker", compose: str = "docker-compose") -> InstallationOutcome:
    """Check which executables resolve on PATH after installing."""
    return InstallationOutcome(
        runtime_present=shutil.which(runtime) is not None,
        compose_present=shutil.which(compose) is not None,
    )


def format_status_line(outcome: InstallationOutcome) -> str:
    """Single human-readable status line for an outcome."""
    if outcome.complete:
        return SUCCESS_MESSAGE
    runtime = str(outcome.runtime_present).lower()
    compose = str(outcome.compose_present).lower()
    return f"Docker: {runtime}, Docker Compose: {compose}"
