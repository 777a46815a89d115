"""Core package for reactor resumption planning and dependency-management import."""

from .load_config import PlannerConfig, apply_config, load_config
from .management_merger import import_management, update_import_chain
from .models import (
    BuildOutcome,
    BuildOutcomeSet,
    Coordinate,
    ManagementEntry,
    ManagementKey,
    ManagementTable,
    Project,
    ProjectModel,
    ResumptionPlan,
)
from .provenance import ProvenanceArena, ProvenanceNode
from .report import describe_import_chain, print_import_chain, print_resumption_plan
from .resumption_planner import (
    determine_projects_to_skip,
    determine_resumption_properties,
    plan_resumption,
    resume_from_selector,
)

__all__ = [
    "BuildOutcome",
    "BuildOutcomeSet",
    "Coordinate",
    "ManagementEntry",
    "ManagementKey",
    "ManagementTable",
    "Project",
    "ProjectModel",
    "ResumptionPlan",
    "ProvenanceArena",
    "ProvenanceNode",
    "PlannerConfig",
    "load_config",
    "apply_config",
    "plan_resumption",
    "determine_projects_to_skip",
    "determine_resumption_properties",
    "resume_from_selector",
    "import_management",
    "update_import_chain",
    "print_resumption_plan",
    "describe_import_chain",
    "print_import_chain",
]
