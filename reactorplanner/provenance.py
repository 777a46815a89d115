from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(slots=True)
class ProvenanceNode:
    node_id: int
    model_id: str
    location: str | None = None
    imported_by: int | None = None


@dataclass(slots=True)
class ProvenanceArena:
    """Originating files of a model-building session, linked by importer.

    Nodes are addressed by integer id. Each node holds at most one importer id,
    so the links form singly linked chains rooted at the top-level file. The
    arena only ever sets an importer on a node that has none and rejects any
    link that would close a loop.
    """

    nodes: Dict[int, ProvenanceNode] = field(default_factory=dict)

    def add(self, model_id: str, location: str | None = None) -> int:
        node_id = len(self.nodes)
        self.nodes[node_id] = ProvenanceNode(node_id=node_id, model_id=model_id, location=location)
        return node_id

    def get(self, node_id: int) -> ProvenanceNode:
        return self.nodes[node_id]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def importer_of(self, node_id: int) -> ProvenanceNode | None:
        importer = self.get(node_id).imported_by
        if importer is None:
            return None
        return self.get(importer)

    def import_chain(self, node_id: int) -> List[ProvenanceNode]:
        """Return the node followed by each of its transitive importers."""

        chain = [self.get(node_id)]
        while chain[-1].imported_by is not None:
            chain.append(self.get(chain[-1].imported_by))
        return chain

    def would_cycle(self, node_id: int, importer_id: int) -> bool:
        return any(node.node_id == node_id for node in self.import_chain(importer_id))

    def set_importer(self, node_id: int, importer_id: int) -> None:
        if node_id not in self.nodes or importer_id not in self.nodes:
            raise ValueError(f"Unknown provenance node in link {node_id} -> {importer_id}")
        node = self.nodes[node_id]
        if node.imported_by == importer_id:
            return
        if node.imported_by is not None:
            raise ValueError(
                f"Provenance node {node_id} ({node.model_id}) is already imported by {node.imported_by}"
            )
        if self.would_cycle(node_id, importer_id):
            raise ValueError(f"Linking {node_id} to importer {importer_id} would create a cycle")
        node.imported_by = importer_id
