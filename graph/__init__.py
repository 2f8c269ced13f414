"""
graph/
-----
Core data layer.  Public API:

    from graph import parse, GraphModel, GraphBuilder
    from graph import diff_node_ids, NodeDiff
"""

from graph.model  import GraphModel, GraphBuilder
from graph.parser import parse
from graph.diff   import NodeDiff, diff_node_ids

__all__ = [
    "GraphModel",   "GraphBuilder",
    "parse",
    "NodeDiff",     "diff_node_ids",
]
