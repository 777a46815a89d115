from __future__ import annotations

from reactorplanner import Coordinate, ManagementEntry, Project


def make_project(artifact: str, *depends_on: Project, group: str = "test") -> Project:
    return Project(
        coordinate=Coordinate(group, artifact),
        dependencies=[dependency.coordinate for dependency in depends_on],
    )


def make_entry(coordinate: str, version: str | None = None, source: int | None = None) -> ManagementEntry:
    group, artifact, *rest = coordinate.split(":")
    return ManagementEntry(
        group=group,
        artifact=artifact,
        version=version,
        type=rest[0] if rest else "jar",
        classifier=rest[1] if len(rest) > 1 else None,
        source=source,
    )
