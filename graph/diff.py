"""
diff.py - Node diff between two successive parses
===================================================
The editor re-parses on every (debounced) change.  The diagram layer
wants to flash nodes that just appeared and show a card for nodes that
were deleted; this is the data it needs.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from graph.model import GraphModel


@dataclass(frozen=True)
class NodeDiff:
    added:   Tuple[str, ...] = ()   # in current, not in previous (current order)
    removed: Tuple[str, ...] = ()   # in previous, not in current (previous order)
    kept:    Tuple[str, ...] = ()   # in both (current order)

    def to_dict(self) -> dict:
        return {"added": list(self.added), "removed": list(self.removed), "kept": list(self.kept)}


def diff_node_ids(previous: Optional[GraphModel], current: GraphModel) -> NodeDiff:
    before = set(previous.node_ids) if previous is not None else set()
    after = set(current.node_ids)
    return NodeDiff(
        added=tuple(n for n in current.node_ids if n not in before),
        removed=tuple(n for n in (previous.node_ids if previous is not None else ()) if n not in after),
        kept=tuple(n for n in current.node_ids if n in before),
    )
