"""
parser.py - Graph Description Parser
=====================================
Text → GraphModel.  Tolerant by construction: the input is live editor
text that is invalid half the time, so nothing here raises.

    model = parse('''
        graph TD
        Root((Root)) --> A[Branch A]
        Root --> B   %% comment
    ''')
    model.node_ids    → ("Root", "A", "B")
    model.start_node  → "Root"

Per line:
  1. drop the comment tail, trim, skip blanks
  2. split on edge operators into segments
  3. ≥ 2 segments → every adjacent pair is a directed edge
     1 segment    → a bare node declaration
Pairs whose endpoints are not both identifiers are dropped whole.
"""

import logging
from typing import Optional

from graph.lexer import extract_identifier, split_segments, strip_comment
from graph.model import GraphBuilder, GraphModel

logger = logging.getLogger(__name__)


def parse(text: Optional[str]) -> GraphModel:
    builder = GraphBuilder()
    if not text:
        return builder.build()

    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = strip_comment(raw)
        if not line:
            continue

        segments = split_segments(line)
        if len(segments) >= 2:
            _add_chain(builder, segments, lineno)
        else:
            node_id = extract_identifier(segments[0])
            if node_id:
                builder.add_node(node_id)
            else:
                logger.debug("line %d: no identifier in %r", lineno, line)

    return builder.build()


def _add_chain(builder: GraphBuilder, segments, lineno: int) -> None:
    for left, right in zip(segments, segments[1:]):
        source = extract_identifier(left)
        target = extract_identifier(right)
        if not (source and target):
            logger.debug("line %d: skipping pair %r → %r", lineno, left, right)
            continue
        if not builder.add_edge(source, target):
            logger.debug("line %d: duplicate edge %s → %s", lineno, source, target)
