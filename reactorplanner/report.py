from __future__ import annotations

from typing import List, Sequence

from .logging_utils import log_info, log_ok, log_warn
from .models import ManagementEntry, Project, ResumptionPlan
from .provenance import ProvenanceArena
from .resumption_planner import resume_from_selector


def print_resumption_plan(plan: ResumptionPlan, projects: Sequence[Project]) -> None:
    if plan.is_empty:
        log_ok("Nothing to resume.")
        return

    if plan.resume_from is not None:
        failed = next((project for project in projects if project.coordinate == plan.resume_from), None)
        selector = resume_from_selector(projects, failed) if failed else str(plan.resume_from)
        log_info(f"Resume the build from {plan.resume_from} (-rf {selector})")
    else:
        log_info("The first project failed, resume from the start of the reactor.")

    if plan.excluded_projects:
        log_info(f"Skipping {len(plan.excluded_projects)} project(s) that already succeeded:")
        for coordinate in plan.excluded_projects:
            log_info(str(coordinate), indent=2)


def describe_import_chain(entry: ManagementEntry, arena: ProvenanceArena) -> List[str]:
    """Model ids from the file declaring ``entry`` up to the top-level import."""

    if entry.source is None or entry.source not in arena:
        return []
    return [node.model_id for node in arena.import_chain(entry.source)]


def print_import_chain(entry: ManagementEntry, arena: ProvenanceArena) -> None:
    chain = describe_import_chain(entry, arena)
    if not chain:
        log_warn(f"No location information for {entry.label}")
        return
    log_info(f"{entry.label} is managed by {chain[0]}")
    for model_id in chain[1:]:
        log_info(f"imported by {model_id}", indent=2)
