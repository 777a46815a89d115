from __future__ import annotations

from typing import Dict, Sequence

from .logging_utils import log_debug
from .models import ManagementEntry, ManagementKey, ManagementTable, ProjectModel
from .provenance import ProvenanceArena


def update_import_chain(entry: ManagementEntry, bom: ManagementTable, arena: ProvenanceArena) -> None:
    """Record that the file declaring ``entry`` became reachable through ``bom``.

    The link is set on the root of the entry's importer chain, so it applies to
    the whole declaring file, once per distinct root.
    """

    if entry.source is None or bom.source is None:
        return
    if entry.source not in arena or bom.source not in arena:
        return

    bom_source = arena.get(bom.source)
    hierarchical = arena.get(entry.source)
    if hierarchical.model_id == bom_source.model_id:
        return

    while hierarchical.imported_by is not None:
        importer = arena.get(hierarchical.imported_by)
        if importer.model_id == bom_source.model_id:
            return
        hierarchical = importer

    if arena.would_cycle(hierarchical.node_id, bom_source.node_id):
        log_debug(
            f"Not linking {hierarchical.model_id} to {bom_source.model_id}: the import chain would loop",
            indent=2,
        )
        return
    arena.set_importer(hierarchical.node_id, bom_source.node_id)
    log_debug(f"{hierarchical.model_id} is imported by {bom_source.model_id}", indent=2)


def import_management(
    target: ProjectModel,
    imports: Sequence[ManagementTable] | None,
    arena: ProvenanceArena | None = None,
    location_tracking: bool = False,
) -> ManagementTable | None:
    """Merge imported dependency management into ``target`` in place.

    Entries already managed by the target win, then earlier imports win over
    later ones. Returns the target's resulting table.
    """

    if not imports:
        return target.dependency_management

    merged: Dict[ManagementKey, ManagementEntry] = {}
    table = target.dependency_management
    if table is not None:
        for entry in table.entries:
            merged.setdefault(entry.management_key, entry)
    else:
        table = ManagementTable()
        target.dependency_management = table

    for source in imports:
        for entry in source.entries:
            key = entry.management_key
            if key in merged:
                log_debug(f"{key} already managed, ignoring import", indent=2)
                continue
            merged[key] = entry
            if location_tracking and arena is not None:
                update_import_chain(entry, source, arena)

    table.entries = list(merged.values())
    return table
