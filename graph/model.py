"""
model.py - Graph Model & Builder
=================================
The immutable result of one parse call, plus the mutable scratch-pad
the parser fills while it walks the text.

    builder = GraphBuilder()
    builder.add_edge("A", "B")
    builder.add_node("C")
    model = builder.build()        # GraphModel, frozen

Design decisions:
  - `node_ids` is a tuple in first-seen order.  That order is meaningful:
    it breaks ties for root selection and drives linear mode.
  - `adjacency` is a read-only mapping of node id → tuple of targets.
    Every node id has an entry, possibly empty, so lookups never miss.
  - Nothing outside the builder ever sees a half-built model.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Set, Tuple

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# GraphModel
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphModel:
    """
    Attributes:
        node_ids   : Unique node ids, first-seen order.
        adjacency  : {node_id: (target, …)}, targets deduplicated, first-seen order.
        start_node : Traversal root, or None for an empty model.
    """

    node_ids:   Tuple[str, ...]                = ()
    adjacency:  Mapping[str, Tuple[str, ...]]  = field(default_factory=lambda: MappingProxyType({}))
    start_node: Optional[str]                  = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def neighbours(self, node_id: str) -> Tuple[str, ...]:
        return self.adjacency.get(node_id, ())

    def node_count(self) -> int:
        return len(self.node_ids)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    def is_empty(self) -> bool:
        return not self.node_ids

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.adjacency

    # mappingproxy is unhashable; equal models must still hash equal
    def __hash__(self) -> int:
        return hash((self.node_ids, tuple(sorted(self.adjacency.items())), self.start_node))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "node_ids":   list(self.node_ids),
            "adjacency":  {src: list(targets) for src, targets in self.adjacency.items()},
            "start_node": self.start_node,
        }

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()}, start={self.start_node})"


# ---------------------------------------------------------------------------
# GraphBuilder
# ---------------------------------------------------------------------------
class GraphBuilder:
    """
    Accumulates nodes and edges in insertion order.

    Attributes:
        _order        : node ids, first-seen order
        _adj          : {node_id: [target, …]}
        _has_incoming : ids that have appeared as an edge target
    """

    def __init__(self):
        self._order:        List[str]            = []
        self._adj:          Dict[str, List[str]] = {}
        self._has_incoming: Set[str]             = set()

    def add_node(self, node_id: str) -> None:
        if node_id in self._adj:
            return
        self._order.append(node_id)
        self._adj[node_id] = []

    def add_edge(self, source: str, target: str) -> bool:
        """Register both endpoints and the edge.  Returns False for a duplicate."""
        self.add_node(source)
        self.add_node(target)
        self._has_incoming.add(target)
        targets = self._adj[source]
        if target in targets:
            return False
        targets.append(target)
        return True

    def select_root(self) -> Optional[str]:
        """First node with no incoming edge; all-targets graphs fall back to the first node."""
        for node_id in self._order:
            if node_id not in self._has_incoming:
                return node_id
        return self._order[0] if self._order else None

    def build(self) -> GraphModel:
        start = self.select_root()
        model = GraphModel(
            node_ids=tuple(self._order),
            adjacency=MappingProxyType({nid: tuple(self._adj[nid]) for nid in self._order}),
            start_node=start,
        )
        logger.debug("built %r", model)
        return model
