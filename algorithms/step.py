"""
step.py - Trace Step Snapshot
==============================
Every traversal is a generator that yields TraceStep objects.
A TraceStep is a frozen-in-time picture of what the playback layer
needs for one frame:

    • Which node this event concerns
    • A log message ("Start at Root [A]", "Visited B", …)
    • What came off the frontier ("dequeued B" / "popped B")
    • What went onto the frontier in this step
    • The full frontier and visited set right after the step

Design decisions:
  - TraceStep is frozen and its sequences are tuples.  The generator is
    the only writer; the recorder / playback helpers are pure readers.
  - `kind` separates informational events (start, linear enumeration)
    from visit events so the log can colour them differently.
  - `frontier_kind` tells the UI how to draw `frontier_snapshot`
    (queue left-to-right, stack top-first, or nothing at all).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple


class StepKind(Enum):
    INFO  = "info"    # start event / linear enumeration
    VISIT = "visit"   # node removed from the frontier and visited


class FrontierKind(Enum):
    QUEUE  = "Queue"
    STACK  = "Stack"
    LINEAR = "Linear"   # no frontier structure


@dataclass(frozen=True)
class TraceStep:
    """
    Attributes:
        step_number       : 0-based index of this step in the trace.
        node_id           : Node this step concerns.
        message           : Human-readable log line.
        kind              : StepKind.
        action            : Frontier removal performed ("dequeued X"), None for INFO steps.
        newly_discovered  : Nodes added to the frontier by this step, in insertion order.
        frontier_snapshot : Whole frontier after this step (queue head / stack bottom first).
        frontier_kind     : Which structure frontier_snapshot represents.
        visited_snapshot  : Visited nodes so far, in visitation order.
    """

    step_number:       int              = 0
    node_id:           str              = ""
    message:           str              = ""
    kind:              StepKind         = StepKind.INFO
    action:            Optional[str]    = None
    newly_discovered:  Tuple[str, ...]  = ()
    frontier_snapshot: Tuple[str, ...]  = ()
    frontier_kind:     FrontierKind     = FrontierKind.LINEAR
    visited_snapshot:  Tuple[str, ...]  = ()

    def to_dict(self) -> dict:
        return {
            "step_number":       self.step_number,
            "node_id":           self.node_id,
            "message":           self.message,
            "kind":              self.kind.value,
            "action":            self.action,
            "newly_discovered":  list(self.newly_discovered),
            "frontier_snapshot": list(self.frontier_snapshot),
            "frontier_kind":     self.frontier_kind.value,
            "visited_snapshot":  list(self.visited_snapshot),
        }


# ---------------------------------------------------------------------------
# Builder - numbers steps and copies the live containers into snapshots
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Usage inside a traversal generator:
        sb = StepBuilder(FrontierKind.QUEUE)
        yield sb.info(start, f"Start at Root [{start}]", frontier=queue)
        yield sb.visit(node, f"dequeued {node}", added, frontier=queue, visited=visited)
    """

    def __init__(self, frontier_kind: FrontierKind):
        self.frontier_kind = frontier_kind
        self.step_no = 0

    def info(
        self,
        node_id: str,
        message: str,
        frontier: Iterable[str] = (),
        visited: Iterable[str] = (),
    ) -> TraceStep:
        return self._build(node_id, message, StepKind.INFO, None, (), frontier, visited)

    def visit(
        self,
        node_id: str,
        action: str,
        discovered: Iterable[str],
        frontier: Iterable[str],
        visited: Iterable[str],
    ) -> TraceStep:
        return self._build(node_id, f"Visited {node_id}", StepKind.VISIT, action, discovered, frontier, visited)

    def _build(self, node_id, message, kind, action, discovered, frontier, visited) -> TraceStep:
        step = TraceStep(
            step_number=self.step_no,
            node_id=node_id,
            message=message,
            kind=kind,
            action=action,
            newly_discovered=tuple(discovered),
            frontier_snapshot=tuple(frontier),
            frontier_kind=self.frontier_kind,
            visited_snapshot=tuple(visited),
        )
        self.step_no += 1
        return step
