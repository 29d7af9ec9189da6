"""Install planning and execution for dockstrap."""

from __future__ import annotations

import logging
from typing import Callable

from command_execution import failed_steps, run_steps
from commandoutput import print_notes, print_stage_header
from config import InstallerConfig
from distro import detect_distribution, get_distro_config
from initsys import UNKNOWN_INIT_MESSAGE, detect_init_system, service_steps
from model import Elevation, InitSystem, InstallPlan, StepResult
from postinstall import group_steps

log = logging.getLogger(__name__)


def build_plan(config: InstallerConfig, elevation: Elevation) -> InstallPlan:
    """Classify the host and assemble every step of the install.

    Raises:
        UnsupportedDistribution: the host matches none of the supported
            distributions
    """
    distribution = detect_distribution(config.root)
    distro = get_distro_config(distribution)
    init_system = detect_init_system(config.root)
    log.info(f"Planning install: distro={distribution.value} init={init_system.value}")

    services = service_steps(init_system, elevation, config.service_name)
    service_notes = (UNKNOWN_INIT_MESSAGE,) if init_system is InitSystem.UNKNOWN else ()
    groups, group_notes = group_steps(elevation, init_system, config.group_name)

    return InstallPlan(
        elevation=elevation,
        distribution=distribution,
        init_system=init_system,
        package_steps=tuple(distro.package_steps(elevation)),
        service_steps=tuple(services),
        group_steps=tuple(groups),
        service_notes=service_notes,
        group_notes=tuple(group_notes),
    )


def execute_plan(
    plan: InstallPlan,
    config: InstallerConfig,
    on_result: Callable[[StepResult], None] | None = None,
) -> list[StepResult]:
    """Run the plan stage by stage and collect every step result.

    Failures never raise. With halt_on_error, once a required step fails
    all later steps, including later stages, are returned as skipped.
    """
    stages = [
        ("Installing packages", plan.package_steps, ()),
        ("Enabling service", plan.service_steps, plan.service_notes),
        ("Configuring group membership", plan.group_steps, plan.group_notes),
    ]

    results: list[StepResult] = []
    for title, steps, notes in stages:
        print_stage_header(title)
        print_notes(notes)
        if config.halt_on_error and failed_steps(results):
            for step in steps:
                result = StepResult(step=step, returncode=0, skipped=True)
                results.append(result)
                if on_result is not None:
                    on_result(result)
            continue
        results.extend(run_steps(
            steps,
            dry_run=config.dry_run,
            halt_on_error=config.halt_on_error,
            on_result=on_result,
        ))
    return results
