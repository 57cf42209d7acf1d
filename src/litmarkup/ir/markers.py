"""Marker tokens - join template fragments and split them back out of parsed text."""

from __future__ import annotations

import re
from typing import Sequence

from litmarkup.ir.nodes import AttrIR, MarkerRef, Part, Text

# Valid inside text content and attribute values, and never markup syntax.
MARKER_PATTERN = re.compile(r"\[\[\[([0-9]+)\]\]\]")


def marker(index: int) -> str:
    """Marker token for the substitution at `index`."""
    return f"[[[{index}]]]"


def join_fragments(fragments: Sequence[str]) -> str:
    """Join template fragments, inserting a marker between each pair.

    Example: ["<div>Hello ", "!</div>"] => "<div>Hello [[[0]]]!</div>"
    """
    last = len(fragments) - 1
    return "".join(
        fragment + (marker(index) if index < last else "")
        for index, fragment in enumerate(fragments)
    )


def collapse_whitespace(text: str) -> str:
    """Condense leading and trailing whitespace runs to a single space.

    Example: "   Hello, world   " => " Hello, world "
    """
    if not text:
        return text
    trimmed = text.strip()
    if not trimmed:
        return " "
    leading = " " if text[0].isspace() else ""
    trailing = " " if text[-1].isspace() else ""
    return f"{leading}{trimmed}{trailing}"


def split_markers(text: str) -> AttrIR:
    """Collapse whitespace in `text` and split it on marker tokens.

    Returns a Text when there are no markers, a bare MarkerRef when the
    text is exactly one marker, and a tuple of parts otherwise.
    """
    collapsed = collapse_whitespace(text)
    pieces = MARKER_PATTERN.split(collapsed)
    if len(pieces) == 1:
        return Text(collapsed)

    # Even positions are text, odd positions are captured marker indices.
    parts: list[Part] = []
    for position, piece in enumerate(pieces):
        if position % 2:
            parts.append(MarkerRef(int(piece)))
        elif piece:
            parts.append(Text(piece))

    if len(parts) == 1 and isinstance(parts[0], MarkerRef):
        return parts[0]
    return tuple(parts)
