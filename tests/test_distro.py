"""Tests for distro module."""

from unittest.mock import patch

import pytest

from distro import (
    DistroConfig,
    detect_distribution,
    get_distro_config,
    list_supported_distros,
    read_lsb_distributor_id,
)
from distro.alpine import AlpineDistro
from distro.arch import ArchDistro
from distro.debian import DebianDistro, UbuntuDistro
from distro.fedora import FedoraDistro
from errors import UnsupportedDistribution
from model import Distribution


@pytest.fixture
def no_lsb_release():
    """Pretend the lsb_release command is not installed."""
    with patch("distro.detector.shutil.which", return_value=None):
        yield


@pytest.fixture
def fixed_apt_host():
    """Stable architecture and codename for apt source lines."""
    with patch.object(DebianDistro, "get_architecture", return_value="amd64"), \
            patch.object(DebianDistro, "get_codename", return_value="bookworm"):
        yield


class TestDetectDistribution:
    """Test detect_distribution() function."""

    def test_debian_marker(self, host_root):
        """/etc/debian_version means Debian."""
        assert detect_distribution(host_root("etc/debian_version")) is Distribution.DEBIAN

    def test_fedora_marker(self, host_root):
        """/etc/fedora-release means Fedora."""
        assert detect_distribution(host_root("etc/fedora-release")) is Distribution.FEDORA

    def test_arch_marker(self, host_root):
        """/etc/arch-release means Arch."""
        assert detect_distribution(host_root("etc/arch-release")) is Distribution.ARCH

    def test_alpine_marker(self, host_root):
        """/etc/alpine-release means Alpine."""
        assert detect_distribution(host_root("etc/alpine-release")) is Distribution.ALPINE

    @patch("distro.detector.query_output", return_value="Ubuntu")
    @patch("distro.detector.shutil.which", return_value="/usr/bin/lsb_release")
    def test_ubuntu_from_lsb_release_command(self, mock_which, mock_query, host_root):
        """The host's lsb-release marker asks lsb_release -si for the name."""
        root = host_root("etc/lsb-release")
        with patch("distro.detector.HOST_LSB_RELEASE", root / "etc/lsb-release"):
            assert detect_distribution(root) is Distribution.UBUNTU
        mock_query.assert_called_once_with(["lsb_release", "-si"])

    @patch("distro.detector.query_output", return_value="Ubuntu")
    @patch("distro.detector.shutil.which", return_value="/usr/bin/lsb_release")
    def test_other_root_reads_marker_file(self, mock_which, mock_query, host_root):
        """Under a non-host root the host's lsb_release is not consulted."""
        root = host_root("etc/lsb-release", contents={"etc/lsb-release": "DISTRIB_ID=Arch\n"})
        assert detect_distribution(root) is Distribution.ARCH
        mock_query.assert_not_called()

    def test_ubuntu_from_lsb_release_file(self, host_root, no_lsb_release):
        """Falls back to DISTRIB_ID when lsb_release is missing."""
        root = host_root(
            "etc/lsb-release",
            contents={"etc/lsb-release": 'DISTRIB_ID="Ubuntu"\nDISTRIB_RELEASE=24.04\n'},
        )
        assert detect_distribution(root) is Distribution.UBUNTU

    def test_debian_wins_over_lsb_release(self, host_root, no_lsb_release):
        """Debian marker is checked before the lsb-release marker."""
        root = host_root(
            "etc/debian_version",
            "etc/lsb-release",
            contents={"etc/lsb-release": "DISTRIB_ID=Ubuntu\n"},
        )
        assert detect_distribution(root) is Distribution.DEBIAN

    def test_lsb_release_wins_over_fedora(self, host_root, no_lsb_release):
        """Earlier probes stop the search."""
        root = host_root(
            "etc/lsb-release",
            "etc/fedora-release",
            contents={"etc/lsb-release": "DISTRIB_ID=Arch\n"},
        )
        assert detect_distribution(root) is Distribution.ARCH

    def test_unknown_lsb_name_is_unsupported(self, host_root, no_lsb_release):
        """An lsb-release name outside the five supported ones is fatal."""
        root = host_root("etc/lsb-release", contents={"etc/lsb-release": "DISTRIB_ID=LinuxMint\n"})
        with pytest.raises(UnsupportedDistribution) as exc_info:
            detect_distribution(root)
        assert "LinuxMint" in str(exc_info.value)

    def test_no_markers_is_unsupported(self, host_root):
        """No marker at all raises UnsupportedDistribution."""
        with pytest.raises(UnsupportedDistribution) as exc_info:
            detect_distribution(host_root())
        assert "Unsupported distribution" in str(exc_info.value)

    def test_marker_directory_does_not_count(self, host_root):
        """Markers must be regular files."""
        with pytest.raises(UnsupportedDistribution):
            detect_distribution(host_root("etc/arch-release/"))


class TestReadLsbDistributorId:
    """Test read_lsb_distributor_id() function."""

    @patch("distro.detector.query_output", return_value="")
    @patch("distro.detector.shutil.which", return_value="/usr/bin/lsb_release")
    def test_empty_command_output_falls_back_to_file(self, mock_which, mock_query, host_root):
        """Empty lsb_release output uses the marker file."""
        root = host_root("etc/lsb-release", contents={"etc/lsb-release": "DISTRIB_ID=Arch\n"})
        assert read_lsb_distributor_id(root / "etc/lsb-release") == "Arch"

    def test_missing_distrib_id(self, host_root, no_lsb_release):
        """No DISTRIB_ID line gives an empty name."""
        root = host_root("etc/lsb-release", contents={"etc/lsb-release": "DISTRIB_RELEASE=1\n"})
        assert read_lsb_distributor_id(root / "etc/lsb-release") == ""


class TestRegistry:
    """Test get_distro_config() and list_supported_distros()."""

    @pytest.mark.parametrize(
        ("distribution", "cls"),
        [
            (Distribution.DEBIAN, DebianDistro),
            (Distribution.UBUNTU, UbuntuDistro),
            (Distribution.FEDORA, FedoraDistro),
            (Distribution.ARCH, ArchDistro),
            (Distribution.ALPINE, AlpineDistro),
        ],
    )
    def test_every_distribution_has_config(self, distribution, cls):
        """Each supported value maps to its config class."""
        config = get_distro_config(distribution)
        assert type(config) is cls
        assert isinstance(config, DistroConfig)

    def test_unsupported_has_no_config(self):
        """UNSUPPORTED raises instead of returning a config."""
        with pytest.raises(UnsupportedDistribution):
            get_distro_config(Distribution.UNSUPPORTED)

    def test_lists_five_distros(self):
        """All five distributions are registered, sorted."""
        assert list_supported_distros() == ["Alpine", "Arch", "Debian", "Fedora", "Ubuntu"]


class TestDebianDistro:
    """Test Debian and Ubuntu install sequences."""

    def test_package_manager(self):
        """Uses apt."""
        assert DebianDistro().package_manager == "apt"

    def test_first_step_removes_conflicts_optionally(self, sudo, fixed_apt_host):
        """Old package removal is allowed to fail."""
        steps = DebianDistro().package_steps(sudo)
        assert steps[0].argv[:3] == ("sudo", "apt-get", "remove")
        assert steps[0].optional is True
        assert all(not s.optional for s in steps[1:])

    def test_gpg_key_is_piped(self, sudo, fixed_apt_host):
        """Key download is unprivileged and piped into elevated gpg."""
        key = next(s for s in DebianDistro().package_steps(sudo) if s.pipe_from)
        assert key.pipe_from == ("curl", "-fsSL", "https://download.docker.com/linux/debian/gpg")
        assert key.argv == ("sudo", "gpg", "--dearmor", "-o", "/etc/apt/keyrings/docker.gpg")

    def test_source_list_contents(self, sudo, fixed_apt_host):
        """Repository line carries arch, keyring and codename."""
        tee = next(s for s in DebianDistro().package_steps(sudo) if s.stdin is not None)
        assert tee.argv == ("sudo", "tee", "/etc/apt/sources.list.d/docker.list")
        assert tee.stdin == (
            "deb [arch=amd64 signed-by=/etc/apt/keyrings/docker.gpg] "
            "https://download.docker.com/linux/debian bookworm stable\n"
        )

    def test_ubuntu_uses_ubuntu_repository(self, doas, fixed_apt_host):
        """Ubuntu fetches key and packages from the ubuntu path."""
        steps = UbuntuDistro().package_steps(doas)
        key = next(s for s in steps if s.pipe_from)
        tee = next(s for s in steps if s.stdin is not None)
        assert key.pipe_from[-1].endswith("/linux/ubuntu/gpg")
        assert "/linux/ubuntu bookworm" in tee.stdin
        assert all(s.argv[0] == "doas" for s in steps)

    def test_installs_compose(self, as_root, fixed_apt_host):
        """Last step installs engine and compose without a prefix."""
        last = DebianDistro().package_steps(as_root)[-1]
        assert last.argv[:3] == ("apt-get", "install", "-y")
        assert "docker-compose-plugin" in last.argv
        assert "docker-compose" in last.argv


class TestFedoraDistro:
    """Test Fedora install sequence."""

    def test_sequence(self, sudo):
        """Remove, plugins, repo, install."""
        steps = FedoraDistro().package_steps(sudo)
        assert [s.argv[1:3] for s in steps] == [
            ("dnf", "remove"),
            ("dnf", "-y"),
            ("dnf", "config-manager"),
            ("dnf", "install"),
        ]
        assert steps[0].optional is True

    def test_repo_url(self, sudo):
        """Adds Docker's Fedora repository."""
        repo = FedoraDistro().package_steps(sudo)[2]
        assert repo.argv[-1] == "https://download.docker.com/linux/fedora/docker-ce.repo"


class TestArchAndAlpine:
    """Test single-step distributions."""

    def test_arch(self, sudo):
        """pacman installs from the default repositories."""
        steps = ArchDistro().package_steps(sudo)
        assert [s.argv for s in steps] == [
            ("sudo", "pacman", "-S", "--noconfirm", "docker", "docker-compose"),
        ]

    def test_alpine(self, doas):
        """apk installs docker and docker-compose."""
        steps = AlpineDistro().package_steps(doas)
        assert [s.argv for s in steps] == [("doas", "apk", "add", "docker", "docker-compose")]
