"""Command-line interface for dockstrap."""

import argparse
import logging
import sys
from dataclasses import dataclass

from app import InstallerTUI
from command_execution import failed_steps
from commandoutput import print_failure_summary, print_plan, print_step_result
from config import DOCKSTRAP_VERSION, InstallerConfig, get_log_path
from distro import list_supported_distros
from errors import MissingElevationTool, UnsupportedDistribution
from installer import build_plan, execute_plan
from privilege import resolve_elevation
from verify import format_status_line, verify_installation

log = logging.getLogger(__name__)


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    dry_run: bool
    plan: bool
    stop_on_error: bool
    tui: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    if lines:
        print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def configure_logging() -> None:
    """Send debug logs to the XDG state directory."""
    logging.basicConfig(
        filename=str(get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


class DockstrapHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "dockstrap - Install Docker Engine and Docker Compose with the native package manager.",
            f"Version: {DOCKSTRAP_VERSION}",
            "",
            "Usage:",
            "  dockstrap                     Detect the host, install, enable and verify",
            "",
            "Options:",
            "  dockstrap --plan              Print the detected host and planned commands, then exit",
            "  dockstrap --dry-run           Walk through the install without running anything",
            "  dockstrap --stop-on-error     Stop at the first failed step (exit 1)",
            "  dockstrap --tui               Review the plan in a TUI before installing",
            "  dockstrap --version           Print the version",
            "",
            "Supported distributions: Debian, Ubuntu, Fedora, Arch, Alpine",
            "Supported init systems:  systemd, OpenRC",
            "",
            f"Log file: {get_log_path()}",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for dockstrap CLI."""
    parser = argparse.ArgumentParser(
        prog="dockstrap",
        formatter_class=DockstrapHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--plan", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--dry-run", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--stop-on-error", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--tui", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="version", version=f"dockstrap {DOCKSTRAP_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Returns:
        ParsedArgs with the run mode flags.
    """
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    return ParsedArgs(
        dry_run=args.dry_run,
        plan=args.plan,
        stop_on_error=args.stop_on_error,
        tui=args.tui,
    )


def main() -> None:
    """Main entry point."""
    args = parse_args()
    configure_logging()
    config = InstallerConfig.from_args(args)
    log.info(f"dockstrap {DOCKSTRAP_VERSION} starting: {args}")

    # Elevation is resolved before anything touches the host
    try:
        elevation = resolve_elevation()
    except MissingElevationTool as e:
        log.error(str(e))
        print_error_box(str(e))
        sys.exit(1)

    try:
        plan = build_plan(config, elevation)
    except UnsupportedDistribution as e:
        log.error(str(e))
        print_error_box(str(e), f"Supported: {', '.join(list_supported_distros())}")
        sys.exit(1)

    if args.plan:
        print_plan(plan)
        sys.exit(0)

    if args.tui:
        app = InstallerTUI(plan, version=DOCKSTRAP_VERSION, dry_run=config.dry_run)
        app.run()
        if not app.confirmed:
            print("Cancelled.")
            sys.exit(0)
    else:
        print_plan(plan, dry_run=config.dry_run)

    results = execute_plan(plan, config, on_result=print_step_result)
    print_failure_summary(results)

    # Presence only: a failed step and a PATH problem look the same here
    outcome = verify_installation(config.runtime_executable, config.compose_executable)
    log.info(f"Outcome: {outcome}")
    print(format_status_line(outcome))

    if config.halt_on_error and failed_steps(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
