"""
config.py - App defaults
=========================
Loaded into `app.config`, then overridden from the environment with the
TRACEVIZ_ prefix, e.g.

    TRACEVIZ_DEFAULT_MODE=dfs
    TRACEVIZ_PLAYBACK_INTERVAL_MS=300
    TRACEVIZ_LOG_LEVEL=DEBUG
"""

from engine.playback import DEFAULT_LOOKBACK, SPEED_PRESETS

DEFAULT_MODE          = "bfs"
PLAYBACK_INTERVAL_MS  = SPEED_PRESETS["medium"]
WINDOW_SIZE           = 1
LOG_LOOKBACK          = DEFAULT_LOOKBACK
MAX_CONTENT_LENGTH    = 64 * 1024      # request body cap; editor text is small
LOG_LEVEL             = "INFO"

DEFAULT_GRAPH_TEXT = """graph TD
    Root((Root)) --> A[Branch A]
    Root --> B[Branch B]
    A --> A1[Leaf A1]
    A --> A2[Leaf A2]
    B --> B1[Leaf B1]
    B --> B2[Leaf B2]"""
