"""
recorder.py - Trace Recorder & Summary
=======================================
Runs a traversal generator to completion over a GraphModel and hands
back the full, ordered trace.  Also computes the small summary card the
UI shows next to the trace and produces a JSON-ready export.

Usage:
    model = parse(text)
    trace = generate_trace(model, "bfs")     # List[TraceStep]
    summary = summarize(trace)
    payload = export(model, "bfs", trace)

Every call is independent: nothing is cached between runs, so the
same model and mode always give an identical trace.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple, Union

from graph import GraphModel
from algorithms import REGISTRY, TraversalMode
from algorithms.step import StepKind, TraceStep

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Summary dataclass - what the trace side-panel renders
# ---------------------------------------------------------------------------
@dataclass
class TraceSummary:
    mode:              str             = ""
    label:             str             = ""
    total_steps:       int             = 0
    nodes_visited:     int             = 0     # VISIT steps; 0 for linear mode
    max_frontier_size: int             = 0
    visit_order:       Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["visit_order"] = list(self.visit_order)
        return data


# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------
def generate_trace(model: GraphModel, mode: Union[TraversalMode, str]) -> List[TraceStep]:
    """Exhaust the generator for `mode`.  Raises ValueError for an unknown mode."""
    info = REGISTRY[TraversalMode.parse(mode)]
    trace = list(info.fn(model))
    logger.debug("%s trace: %d step(s) over %r", info.key, len(trace), model)
    return trace


def summarize(trace: List[TraceStep], mode: Union[TraversalMode, str, None] = None) -> TraceSummary:
    info = REGISTRY[TraversalMode.parse(mode)] if mode is not None else None
    visits = [s.node_id for s in trace if s.kind is StepKind.VISIT]
    return TraceSummary(
        mode=info.key if info else "",
        label=info.label if info else "",
        total_steps=len(trace),
        nodes_visited=len(visits),
        max_frontier_size=max((len(s.frontier_snapshot) for s in trace), default=0),
        visit_order=tuple(visits),
    )


# ---------------------------------------------------------------------------
# Export (serialisable snapshot)
# ---------------------------------------------------------------------------
def export(model: GraphModel, mode: Union[TraversalMode, str], trace: List[TraceStep]) -> Dict[str, Any]:
    return {
        "mode":    TraversalMode.parse(mode).value,
        "model":   model.to_dict(),
        "summary": summarize(trace, mode).to_dict(),
        "steps":   [s.to_dict() for s in trace],
    }
