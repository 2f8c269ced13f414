"""
dfs.py - Depth-First Trace
===========================
Generator-based DFS using an explicit stack.

Yields a TraceStep at:
  1. Start  →  root pushed (INFO)
  2. Every pop of an unvisited node  →  VISIT, with the neighbours it pushed

Unvisited neighbours are pushed in REVERSE adjacency order, so the
first neighbour ends up on top and is popped first: the visit order
follows adjacency order even though the frontier is LIFO.

There is no "already on the stack" check when pushing; a node can sit
in the stack more than once.  The "mark on pop" rule drops the extra
copies silently when they surface.
"""

import logging
from typing import Dict, Generator, List

from graph import GraphModel
from algorithms.step import FrontierKind, StepBuilder, TraceStep

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def DFS(graph, root):",                             # 0
    "    stack ← [root]",                                # 1
    "    visited ← []",                                  # 2
    "    while stack is not empty:",                     # 3
    "        node ← stack.pop()",                        # 4
    "        if node in visited: continue",              # 5
    "        visited.add(node)",                         # 6
    "        for neighbour in reversed(adj(node)):",     # 7
    "            if neighbour not in visited:",          # 8
    "                stack.push(neighbour)",             # 9
]


def dfs(model: GraphModel) -> Generator[TraceStep, None, None]:
    start = model.start_node
    if start is None:
        return

    sb = StepBuilder(FrontierKind.STACK)
    stack: List[str] = [start]
    visited: Dict[str, None] = {}

    yield sb.info(start, f"Start at Root [{start}]", frontier=stack)

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited[node] = None

        pushed = [nbr for nbr in reversed(model.neighbours(node)) if nbr not in visited]
        stack.extend(pushed)

        yield sb.visit(node, f"popped {node}", pushed, frontier=stack, visited=visited)

    logger.debug("dfs from %s visited %d node(s)", start, len(visited))
