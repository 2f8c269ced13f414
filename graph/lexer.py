"""
lexer.py - Edge-Operator Vocabulary & Identifier Rules
=======================================================
The graph-description language is loose, human-authored Mermaid-style
text.  Rather than one big regex, the tokenizer is a small fixed table
of edge operators plus two independent rules:

    • strip_comment       – drop everything from the first "%%"
    • extract_identifier  – leading [\\w-]+ token, shape decoration ignored

Supported edge operators (tried in this order at every position):

    A -->|label| B        piped label
    A -- label --> B      dash label
    A --> B               plain arrow
    A -.-> B              dotted arrow
    A ==> B               thick arrow

Design decisions:
  - Operators are kept as named entries so tests (and the UI's syntax
    highlighter) can ask which operators a line used.
  - The dash-label pattern may not start with '-' or '>' and may not run
    across another "-->", so chained lines like "A --> B --> C" still
    yield three segments.
  - Labels are capped at MAX_LABEL_LENGTH characters.  Every "--" or
    "-->|" starts a label scan, so an unbounded label makes long lines
    of dashes quadratic.  An over-long dash label falls back to a plain
    arrow; an over-long piped label leaves no valid target.
  - Identifiers are ASCII word characters and hyphens.  Anything after
    them ([..], ((..)), {..}, (..)) is a shape decoration and ignored.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

COMMENT_MARKER = "%%"
MAX_LABEL_LENGTH = 200


# ---------------------------------------------------------------------------
# Edge operators
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class EdgeOperator:
    name:    str   # e.g. "arrow", "dotted"
    pattern: str   # regex source, no surrounding whitespace
    example: str   # lexeme as typed by the user


EDGE_OPERATORS: Tuple[EdgeOperator, ...] = (
    EdgeOperator("piped_label", rf"-->\|[^|]{{0,{MAX_LABEL_LENGTH}}}\|",            "-->|label|"),
    EdgeOperator("dash_label",  rf"--(?![->])(?:(?!-->).){{0,{MAX_LABEL_LENGTH}}}-->", "-- label -->"),
    EdgeOperator("arrow",       r"-->",                    "-->"),
    EdgeOperator("dotted",      r"-\.->",                  "-.->"),
    EdgeOperator("thick",       r"==>",                    "==>"),
)

_OPERATOR_RE: re.Pattern = re.compile(
    "|".join(f"(?P<{op.name}>{op.pattern})" for op in EDGE_OPERATORS)
)
_SPLIT_RE: re.Pattern = re.compile(
    "|".join(f"(?:{op.pattern})" for op in EDGE_OPERATORS)
)


# ---------------------------------------------------------------------------
# Keywords that look like identifiers but never are
# ---------------------------------------------------------------------------
RESERVED_KEYWORDS: FrozenSet[str] = frozenset({
    "graph", "flowchart",
    "TD", "TB", "BT", "RL", "LR",
    "subgraph", "end",
    "style", "classDef", "linkStyle",
    COMMENT_MARKER,
})

_IDENTIFIER_RE: re.Pattern = re.compile(r"^([\w-]+)", re.ASCII)


# ---------------------------------------------------------------------------
# Line-level helpers
# ---------------------------------------------------------------------------
def strip_comment(line: str) -> str:
    """Remove the comment tail (if any) and trim the rest."""
    return line.split(COMMENT_MARKER, 1)[0].strip()


def split_segments(line: str) -> List[str]:
    """Split a cleaned line on edge operators.

    A line with no operator comes back as a one-element list.  Segments
    are trimmed but otherwise returned as-is (possibly empty, e.g. for a
    dangling arrow); identifier extraction decides what survives.
    """
    return [segment.strip() for segment in _SPLIT_RE.split(line)]


def find_operators(line: str) -> List[str]:
    """Names of the edge operators used in `line`, left to right."""
    return [m.lastgroup for m in _OPERATOR_RE.finditer(line)]


# ---------------------------------------------------------------------------
# Segment-level helpers
# ---------------------------------------------------------------------------
def is_reserved(token: str) -> bool:
    return token in RESERVED_KEYWORDS


def extract_identifier(segment: Optional[str]) -> Optional[str]:
    """
    Return the node id at the front of a segment, or None.

        "NodeA[Label]"     → "NodeA"
        "Root((Root))"     → "Root"
        "  dec-1{Yes?} "   → "dec-1"
        "subgraph One"     → None   (keyword)
        "[orphan label]"   → None
    """
    if not segment:
        return None
    match = _IDENTIFIER_RE.match(segment.strip())
    if match is None:
        return None
    token = match.group(1)
    if is_reserved(token):
        return None
    return token
