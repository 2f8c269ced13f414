"""
bfs.py - Breadth-First Trace
=============================
Generator-based BFS over a GraphModel.  Yields a TraceStep at:
  1. Start  →  root placed in the queue (INFO)
  2. Every dequeue of an unvisited node  →  VISIT, with the neighbours
     it appended to the queue

A node already visited when it reaches the head is dropped without a
step.  A neighbour is only appended if it is neither visited nor
already waiting in the queue, so the queue never holds duplicates.
"""

import logging
from collections import deque
from typing import Dict, Generator, List

from graph import GraphModel
from algorithms.step import FrontierKind, StepBuilder, TraceStep

logger = logging.getLogger(__name__)


PSEUDOCODE: List[str] = [
    "def BFS(graph, root):",                        # 0
    "    queue ← [root]",                           # 1
    "    visited ← []",                             # 2
    "    while queue is not empty:",                # 3
    "        node ← queue.dequeue()",               # 4
    "        if node in visited: continue",         # 5
    "        visited.add(node)",                    # 6
    "        for neighbour in adj(node):",          # 7
    "            if neighbour not in visited",      # 8
    "               and not in queue:",             # 9
    "                queue.enqueue(neighbour)",     # 10
]


def bfs(model: GraphModel) -> Generator[TraceStep, None, None]:
    start = model.start_node
    if start is None:
        return

    sb = StepBuilder(FrontierKind.QUEUE)
    queue = deque([start])
    visited: Dict[str, None] = {}    # insertion-ordered set

    yield sb.info(start, f"Start at Root [{start}]", frontier=queue)

    while queue:
        node = queue.popleft()
        if node in visited:
            continue
        visited[node] = None

        added: List[str] = []
        for nbr in model.neighbours(node):
            if nbr in visited or nbr in queue:
                continue
            queue.append(nbr)
            added.append(nbr)

        yield sb.visit(node, f"dequeued {node}", added, frontier=queue, visited=visited)

    logger.debug("bfs from %s visited %d node(s)", start, len(visited))
