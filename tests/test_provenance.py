from __future__ import annotations

import pytest

from reactorplanner import ProvenanceArena


def test_nodes_are_addressed_by_id(arena: ProvenanceArena) -> None:
    first = arena.add("g:first:1", location="first/pom.xml")
    second = arena.add("g:second:1")

    assert first != second
    assert arena.get(first).location == "first/pom.xml"
    assert arena.get(second).model_id == "g:second:1"
    assert len(arena) == 2
    assert 7 not in arena


def test_import_chain_follows_importers(arena: ProvenanceArena) -> None:
    leaf = arena.add("g:leaf:1")
    middle = arena.add("g:middle:1")
    root = arena.add("g:root:1")
    arena.set_importer(leaf, middle)
    arena.set_importer(middle, root)

    assert [node.model_id for node in arena.import_chain(leaf)] == ["g:leaf:1", "g:middle:1", "g:root:1"]
    importer = arena.importer_of(leaf)
    assert importer is not None
    assert importer.node_id == middle
    assert arena.importer_of(root) is None


def test_set_importer_is_idempotent(arena: ProvenanceArena) -> None:
    leaf = arena.add("g:leaf:1")
    bom = arena.add("g:bom:1")

    arena.set_importer(leaf, bom)
    arena.set_importer(leaf, bom)

    assert arena.get(leaf).imported_by == bom


def test_set_importer_refuses_to_overwrite(arena: ProvenanceArena) -> None:
    leaf = arena.add("g:leaf:1")
    bom = arena.add("g:bom:1")
    other = arena.add("g:other:1")
    arena.set_importer(leaf, bom)

    with pytest.raises(ValueError, match="already imported"):
        arena.set_importer(leaf, other)


def test_set_importer_refuses_cycles(arena: ProvenanceArena) -> None:
    first = arena.add("g:first:1")
    second = arena.add("g:second:1")
    arena.set_importer(first, second)

    with pytest.raises(ValueError, match="cycle"):
        arena.set_importer(second, first)
    with pytest.raises(ValueError, match="cycle"):
        arena.set_importer(second, second)


def test_set_importer_rejects_unknown_nodes(arena: ProvenanceArena) -> None:
    node = arena.add("g:leaf:1")

    with pytest.raises(ValueError, match="Unknown"):
        arena.set_importer(node, 99)
