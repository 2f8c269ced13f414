"""
playback.py - Replay Helpers
=============================
The playback controller (play / pause / step buttons, timers) lives in
the presentation layer.  It owns the current index; this module only
answers questions about `(trace, index)` pairs, so there is no hidden
"current step" anywhere.

    idx = step_forward(trace, idx, +1)
    f = frame(trace, idx, window=2)
    f.active_nodes      → ids to highlight
    f.added / f.removed → frontier change since the previous step
    f.counter           → "3/7"

Out-of-range indexes are clamped, never rejected: the UI may hold a
stale index after the text changed under it.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from algorithms.step import FrontierKind, TraceStep


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, int] = {
    "slow":   1500,
    "medium": 800,
    "fast":   300,
    "turbo":  100,
}

DEFAULT_LOOKBACK = 8


# ---------------------------------------------------------------------------
# Index arithmetic
# ---------------------------------------------------------------------------
def clamp_index(trace: Sequence[TraceStep], index: int) -> int:
    if not trace:
        return 0
    return max(0, min(index, len(trace) - 1))


def step_forward(trace: Sequence[TraceStep], index: int, delta: int = 1) -> int:
    """Manual step (delta = +1 / -1), clamped to the trace."""
    return clamp_index(trace, index + delta)


def step_at(trace: Sequence[TraceStep], index: int) -> Optional[TraceStep]:
    if 0 <= index < len(trace):
        return trace[index]
    return None


def counter_label(trace: Sequence[TraceStep], index: int) -> str:
    if not trace:
        return "0/0"
    return f"{min(index + 1, len(trace))}/{len(trace)}"


# ---------------------------------------------------------------------------
# Per-step derived views
# ---------------------------------------------------------------------------
def frontier_delta(trace: Sequence[TraceStep], index: int) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """(added, removed) relative to the previous step's frontier."""
    current = step_at(trace, index)
    if current is None:
        return (), ()
    previous = trace[index - 1].frontier_snapshot if index > 0 else ()
    added = tuple(n for n in current.frontier_snapshot if n not in previous)
    removed = tuple(n for n in previous if n not in current.frontier_snapshot)
    return added, removed


def display_frontier(step: TraceStep) -> Tuple[str, ...]:
    """Stacks are shown top-first; queues head-first as stored."""
    if step.frontier_kind is FrontierKind.STACK:
        return tuple(reversed(step.frontier_snapshot))
    return step.frontier_snapshot


def active_nodes(trace: Sequence[TraceStep], index: int, window: int = 1) -> Tuple[str, ...]:
    """Nodes of `window` consecutive steps starting at `index`."""
    window = max(1, window)
    index = clamp_index(trace, index)
    return tuple(s.node_id for s in trace[index:index + window])


def log_window(trace: Sequence[TraceStep], index: int, lookback: int = DEFAULT_LOOKBACK) -> List[TraceStep]:
    """Steps from `lookback` before `index` up to and including it."""
    if not trace or index < 0:
        return []
    index = min(index, len(trace) - 1)
    return list(trace[max(0, index - lookback):index + 1])


# ---------------------------------------------------------------------------
# Frame - everything one render tick needs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlaybackFrame:
    index:          int
    counter:        str
    step:           Optional[TraceStep]
    active_nodes:   Tuple[str, ...]
    added:          Tuple[str, ...]
    removed:        Tuple[str, ...]
    frontier_view:  Tuple[str, ...]
    log:            Tuple[TraceStep, ...]
    is_last:        bool

    def to_dict(self) -> dict:
        return {
            "index":         self.index,
            "counter":       self.counter,
            "step":          self.step.to_dict() if self.step else None,
            "active_nodes":  list(self.active_nodes),
            "added":         list(self.added),
            "removed":       list(self.removed),
            "frontier_view": list(self.frontier_view),
            "log":           [s.message for s in self.log],
            "is_last":       self.is_last,
        }


def frame(
    trace: Sequence[TraceStep],
    index: int,
    window: int = 1,
    lookback: int = DEFAULT_LOOKBACK,
) -> PlaybackFrame:
    index = clamp_index(trace, index)
    step = step_at(trace, index)
    added, removed = frontier_delta(trace, index)
    return PlaybackFrame(
        index=index,
        counter=counter_label(trace, index),
        step=step,
        active_nodes=active_nodes(trace, index, window),
        added=added,
        removed=removed,
        frontier_view=display_frontier(step) if step else (),
        log=tuple(log_window(trace, index, lookback)),
        is_last=bool(trace) and index == len(trace) - 1,
    )
