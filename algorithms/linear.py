"""
linear.py - Linear Enumeration
===============================
Not a traversal: one INFO step per node in declaration order.  Edges
are never read, so re-ordering edges without changing the order in
which nodes first appear leaves this trace unchanged.  Useful as a
baseline to compare BFS / DFS against.
"""

from typing import Generator, List

from graph import GraphModel
from algorithms.step import FrontierKind, StepBuilder, TraceStep


PSEUDOCODE: List[str] = [
    "def LINEAR(graph):",           # 0
    "    for node in graph.nodes:",  # 1
    "        process(node)",         # 2
]


def linear(model: GraphModel) -> Generator[TraceStep, None, None]:
    sb = StepBuilder(FrontierKind.LINEAR)
    for node_id in model.node_ids:
        yield sb.info(node_id, f"Processing Node: {node_id}")
