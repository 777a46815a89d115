from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Dict, Iterator, List, Mapping

DEFAULT_TYPE = "jar"
RESUME_FROM_PROPERTY = "resumeFrom"
EXCLUDED_PROJECTS_PROPERTY = "excludedProjects"
PROPERTY_SEPARATOR = ", "
PROPERTY_DELIMITER = ","


class BuildOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class Coordinate:
    group: str
    artifact: str

    def __post_init__(self) -> None:
        if not self.group or not self.artifact:
            raise ValueError(f"Coordinate needs both group and artifact, got '{self.group}:{self.artifact}'")

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact}"

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        parts = [part.strip() for part in text.split(":")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'group:artifact', got '{text}'")
        return cls(parts[0], parts[1])


@dataclass(slots=True)
class Project:
    coordinate: Coordinate
    dependencies: List[Coordinate] = field(default_factory=list)

    @property
    def group(self) -> str:
        return self.coordinate.group

    @property
    def artifact(self) -> str:
        return self.coordinate.artifact

    def depends_on_any(self, coordinates: Collection[Coordinate]) -> bool:
        return any(dependency in coordinates for dependency in self.dependencies)


@dataclass(slots=True)
class BuildOutcomeSet:
    """Reactor projects in topological order, each with its build outcome."""

    results: List[tuple[Project, BuildOutcome]] = field(default_factory=list)

    def add(self, project: Project, outcome: BuildOutcome) -> None:
        self.results.append((project, outcome))

    def add_success(self, project: Project) -> None:
        self.add(project, BuildOutcome.SUCCESS)

    def add_failure(self, project: Project) -> None:
        self.add(project, BuildOutcome.FAILURE)

    def add_skipped(self, project: Project) -> None:
        self.add(project, BuildOutcome.SKIPPED)

    def __iter__(self) -> Iterator[tuple[Project, BuildOutcome]]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def projects(self) -> List[Project]:
        return [project for project, _ in self.results]

    def failed_projects(self) -> List[Project]:
        return [project for project, outcome in self.results if outcome is BuildOutcome.FAILURE]


@dataclass(slots=True)
class ResumptionPlan:
    resume_from: Coordinate | None = None
    excluded_projects: List[Coordinate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.resume_from is None and not self.excluded_projects

    def to_properties(self) -> Dict[str, str]:
        properties: Dict[str, str] = {}
        if self.resume_from is not None:
            properties[RESUME_FROM_PROPERTY] = str(self.resume_from)
        if self.excluded_projects:
            properties[EXCLUDED_PROJECTS_PROPERTY] = PROPERTY_SEPARATOR.join(
                str(coordinate) for coordinate in self.excluded_projects
            )
        return properties

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "ResumptionPlan":
        plan = cls()
        resume_from = properties.get(RESUME_FROM_PROPERTY)
        if resume_from:
            plan.resume_from = Coordinate.parse(resume_from)
        excluded = properties.get(EXCLUDED_PROJECTS_PROPERTY)
        if excluded:
            plan.excluded_projects = [
                Coordinate.parse(item) for item in excluded.split(PROPERTY_DELIMITER) if item.strip()
            ]
        return plan


@dataclass(frozen=True, slots=True)
class ManagementKey:
    group: str
    artifact: str
    type: str = DEFAULT_TYPE
    classifier: str | None = None

    def __str__(self) -> str:
        key = f"{self.group}:{self.artifact}:{self.type}"
        if self.classifier is not None:
            key += f":{self.classifier}"
        return key


@dataclass(slots=True)
class ManagementEntry:
    group: str
    artifact: str
    version: str | None = None
    type: str = DEFAULT_TYPE
    classifier: str | None = None
    scope: str | None = None
    source: int | None = None

    @property
    def management_key(self) -> ManagementKey:
        return ManagementKey(self.group, self.artifact, self.type or DEFAULT_TYPE, self.classifier)

    @property
    def label(self) -> str:
        return f"{self.management_key}:{self.version or '*'}"


@dataclass(slots=True)
class ManagementTable:
    entries: List[ManagementEntry] = field(default_factory=list)
    source: int | None = None

    def add(self, entry: ManagementEntry) -> None:
        self.entries.append(entry)

    def keys(self) -> List[ManagementKey]:
        return [entry.management_key for entry in self.entries]

    def get(self, key: ManagementKey) -> ManagementEntry | None:
        for entry in self.entries:
            if entry.management_key == key:
                return entry
        return None

    def __iter__(self) -> Iterator[ManagementEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True)
class ProjectModel:
    model_id: str
    dependency_management: ManagementTable | None = None
