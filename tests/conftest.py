"""Shared fixtures for dockstrap tests."""

from pathlib import Path

import pytest

from model import Elevation, ElevationMode


@pytest.fixture
def host_root(tmp_path):
    """Factory for a fake filesystem root populated with marker paths.

    Usage:
        root = host_root("etc/debian_version", "run/systemd/system/")
    Paths ending in "/" are created as directories, others as files.
    """

    def make(*markers: str, contents: dict[str, str] | None = None) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for marker in markers:
            path = root / marker
            if marker.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text((contents or {}).get(marker, ""))
        return root

    return make


@pytest.fixture
def sudo():
    """Elevation through sudo."""
    return Elevation(ElevationMode.SUDO, ("sudo",))


@pytest.fixture
def doas():
    """Elevation through doas."""
    return Elevation(ElevationMode.DOAS, ("doas",))


@pytest.fixture
def as_root():
    """No elevation (running as root)."""
    return Elevation(ElevationMode.NONE)


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Keep log files out of the real XDG state directory."""
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
