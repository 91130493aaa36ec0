"""Cursor context classification.

A cheap look at the characters around the cursor, evaluated on every
keystroke; it does not parse the document.
"""

from typing import Optional

from svgsense.buffer import Position, TextBuffer, char_after, char_before
from svgsense.completion.types import Context

__all__ = ["classify", "classify_position"]

_ATTRIBUTE_FOLLOWERS = frozenset("/>")


def classify(prev_char: Optional[str], next_char: Optional[str]) -> Context:
    """Pick the completion context from the characters around the cursor.

    Rules are checked in order and the first match wins:

    - ``<`` before the cursor: a tag name is being typed
    - a space before the cursor, followed by nothing, ``/``, ``>`` or
      whitespace: an attribute name is being typed
    - ``"`` or ``=`` before the cursor: an attribute value is being typed
    """
    if prev_char == "<":
        return Context.TAG_OPEN
    if prev_char == " " and (next_char is None or next_char in _ATTRIBUTE_FOLLOWERS or next_char.isspace()):
        return Context.ATTRIBUTE_NAME
    if prev_char == '"' or prev_char == "=":
        return Context.ATTRIBUTE_VALUE
    return Context.NONE


def classify_position(buffer: TextBuffer, position: Position) -> Context:
    return classify(char_before(buffer, position), char_after(buffer, position))
