"""
engine/
-------
Recording & replay layer.

    from engine import generate_trace, summarize, export
    from engine import frame, step_forward, PlaybackFrame
"""

from engine.recorder import TraceSummary, export, generate_trace, summarize
from engine.playback import (
    DEFAULT_LOOKBACK,
    SPEED_PRESETS,
    PlaybackFrame,
    active_nodes,
    clamp_index,
    counter_label,
    display_frontier,
    frame,
    frontier_delta,
    log_window,
    step_at,
    step_forward,
)

__all__ = [
    "generate_trace",
    "summarize",
    "export",
    "TraceSummary",
    "SPEED_PRESETS",
    "DEFAULT_LOOKBACK",
    "PlaybackFrame",
    "frame",
    "clamp_index",
    "step_forward",
    "step_at",
    "counter_label",
    "frontier_delta",
    "display_frontier",
    "active_nodes",
    "log_window",
]
