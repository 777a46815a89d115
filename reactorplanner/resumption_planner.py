from __future__ import annotations

from typing import Dict, Iterable, List

from .logging_utils import log_debug
from .models import BuildOutcome, Coordinate, Project, ResumptionPlan


def _first_failure_index(outcomes: Iterable[tuple[Project, BuildOutcome]]) -> int | None:
    for index, (_, outcome) in enumerate(outcomes):
        if outcome is BuildOutcome.FAILURE:
            return index
    return None


def determine_projects_to_skip(
    outcomes: Iterable[tuple[Project, BuildOutcome]],
    first_failure: int,
) -> List[Coordinate]:
    """Successful projects after the first failure that need no re-verification.

    Only direct dependency edges are checked: a project that declares a
    dependency on any failed project of the reactor is kept in the rerun.
    """

    results = list(outcomes)
    failed = {project.coordinate for project, outcome in results if outcome is BuildOutcome.FAILURE}
    skipped: List[Coordinate] = []
    for project, outcome in results[first_failure + 1:]:
        if outcome is not BuildOutcome.SUCCESS:
            continue
        if project.depends_on_any(failed):
            log_debug(f"{project.coordinate} depends on a failed project, keeping it in the rerun", indent=2)
            continue
        skipped.append(project.coordinate)
    return skipped


def plan_resumption(outcomes: Iterable[tuple[Project, BuildOutcome]]) -> ResumptionPlan:
    results = list(outcomes)
    first_failure = _first_failure_index(results)
    if first_failure is None:
        log_debug("No failed projects, nothing to resume.")
        return ResumptionPlan()

    plan = ResumptionPlan()
    if first_failure > 0:
        plan.resume_from = results[first_failure][0].coordinate
    else:
        log_debug("First project failed, resuming would rebuild everything.")
    plan.excluded_projects = determine_projects_to_skip(results, first_failure)
    return plan


def determine_resumption_properties(outcomes: Iterable[tuple[Project, BuildOutcome]]) -> Dict[str, str]:
    return plan_resumption(outcomes).to_properties()


def resume_from_selector(projects: Iterable[Project], failed: Project) -> str:
    """Shortest selector that picks out the failed project within the reactor."""

    for project in projects:
        if project.artifact == failed.artifact and project.group != failed.group:
            return str(failed.coordinate)
    return f":{failed.artifact}"
