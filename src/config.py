"""Configuration for dockstrap runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cli import ParsedArgs

DOCKSTRAP_VERSION = "0.3.0"

DOCKER_DOWNLOAD_URL = "https://download.docker.com/linux"
KEYRING_DIR = "/etc/apt/keyrings"
KEYRING_PATH = f"{KEYRING_DIR}/docker.gpg"
APT_SOURCE_LIST = "/etc/apt/sources.list.d/docker.list"


def get_log_path() -> Path:
    """Get the log file path under XDG_STATE_HOME."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "dockstrap"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "dockstrap.log"


@dataclass(frozen=True)
class InstallerConfig:
    """Settings for a single install run."""

    root: Path = Path("/")  # Marker files are probed relative to this
    dry_run: bool = False
    halt_on_error: bool = False
    runtime_executable: str = "docker"
    compose_executable: str = "docker-compose"
    service_name: str = "docker"
    group_name: str = "docker"

    @classmethod
    def from_args(cls, args: "ParsedArgs") -> InstallerConfig:
        return cls(
            dry_run=args.dry_run or args.plan,
            halt_on_error=args.stop_on_error,
        )
