"""
algorithms/__init__.py - Traversal Registry
============================================
Single source of truth for every trace mode the tracer knows about.

    from algorithms import REGISTRY, TraversalMode, get_algorithm

REGISTRY is a dict keyed by TraversalMode:
    {
        TraversalMode.BFS: AlgoInfo(key, label, fn, pseudocode, frontier_kind, …),
        …
    }

Adding a mode is: write the generator, add a TraversalMode member, add
one entry here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from algorithms.step   import FrontierKind, StepBuilder, StepKind, TraceStep
from algorithms.bfs    import bfs    as _bfs,    PSEUDOCODE as _bfs_pc
from algorithms.dfs    import dfs    as _dfs,    PSEUDOCODE as _dfs_pc
from algorithms.linear import linear as _linear, PSEUDOCODE as _lin_pc


class TraversalMode(Enum):
    BFS    = "bfs"
    DFS    = "dfs"
    LINEAR = "linear"

    @classmethod
    def parse(cls, value: Union["TraversalMode", str]) -> "TraversalMode":
        """Accept a member or its string value ("bfs", "DFS", …)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown traversal mode: {value!r}") from None


# ---------------------------------------------------------------------------
# AlgoInfo - metadata card for each mode
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                     # registry key, e.g. "bfs"
    label:            str                     # human label
    fn:               Callable                # GraphModel → generator of TraceStep
    pseudocode:       List[str]
    frontier_kind:    FrontierKind
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "frontier_kind":    self.frontier_kind.value,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[TraversalMode, AlgoInfo] = {

    TraversalMode.BFS: AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        frontier_kind=FrontierKind.QUEUE,
        tags=["traversal", "queue"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the root.",
    ),

    TraversalMode.DFS: AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        frontier_kind=FrontierKind.STACK,
        tags=["traversal", "stack"],
        complexity_time="O(V + E)", complexity_space="O(E)",
        description="Dives deep before backtracking. Children are visited in declaration order.",
    ),

    TraversalMode.LINEAR: AlgoInfo(
        key="linear", label="Linear Enumeration", fn=_linear, pseudocode=_lin_pc,
        frontier_kind=FrontierKind.LINEAR,
        tags=["baseline"],
        complexity_time="O(V)", complexity_space="O(1)",
        description="Lists nodes in the order they were declared. Ignores edges.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(mode: Union[TraversalMode, str]) -> Optional[AlgoInfo]:
    """Return AlgoInfo for a mode or mode string, or None if unknown."""
    try:
        return REGISTRY[TraversalMode.parse(mode)]
    except ValueError:
        return None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered modes in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "TraversalMode",
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "TraceStep",
    "StepKind",
    "FrontierKind",
    "StepBuilder",
]
