"""
Applying accepted candidates to flat text, and textual-autocomplete glue.

The completion engine only describes where the cursor should go after an
insertion; this module is the host side that performs the insertion and the
cursor movement on a ``TargetState`` (text plus cursor offset).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from textual_autocomplete import DropdownItem, TargetState

from svgsense.buffer import Position, StringBuffer
from svgsense.completion.types import CandidateKind, CompletionCandidate, CursorCommand, CursorCommandKind
from svgsense.logger import get_logger

logger = get_logger("completion.applier")

_PREFIXES = {
    CandidateKind.ELEMENT: "<>",
    CandidateKind.ATTRIBUTE: "@",
    CandidateKind.VALUE: "=",
}


@dataclass(slots=True)
class ApplyResult:
    """Result of applying a completion candidate."""

    text: str
    cursor: int
    retrigger: bool = False
    """Value completion should be requested again at the new cursor."""


def move_cursor(text: str, cursor: int, command: Optional[CursorCommand]) -> int:
    """Return the cursor offset after executing ``command`` on ``text``."""
    if command is None:
        return cursor

    if command.kind is CursorCommandKind.MOVE_LEFT:
        return max(0, cursor - command.offset)
    if command.kind is CursorCommandKind.MOVE_RIGHT_PAST_ATTRIBUTE:
        return min(len(text), cursor + command.offset)

    # Up keeps the column, clamped to the length of the target line
    buffer = StringBuffer(text)
    position = buffer.position_at(cursor)
    line = max(0, position.line - command.offset)
    return buffer.offset_at(Position(line, position.character))


class CompletionApplier:
    """Inserts a candidate at the cursor and runs its cursor command."""

    def apply(self, candidate: CompletionCandidate, state: TargetState) -> ApplyResult:
        text = state.text
        cursor = state.cursor_position

        if candidate.text_edit is not None:
            buffer = StringBuffer(text)
            start = buffer.offset_at(candidate.text_edit.start)
            end = buffer.offset_at(candidate.text_edit.end)
            new_text = f"{text[:start]}{candidate.text_edit.new_text}{text[end:]}"
            new_cursor = start + len(candidate.text_edit.new_text)
        else:
            insertion = candidate.insertion
            new_text = f"{text[:cursor]}{insertion}{text[cursor:]}"
            new_cursor = cursor + len(insertion)

        new_cursor = move_cursor(new_text, new_cursor, candidate.command)
        retrigger = candidate.command is not None and candidate.command.has_enum_follow_up
        logger.debug("Applied {} {!r}, cursor {} -> {}", candidate.kind.value, candidate.label, cursor, new_cursor)
        return ApplyResult(text=new_text, cursor=new_cursor, retrigger=retrigger)


def to_dropdown_items(candidates: Iterable[CompletionCandidate]) -> list[DropdownItem]:
    """Dropdown rows for a textual-autocomplete widget."""
    return [DropdownItem(main=candidate.label, prefix=_PREFIXES[candidate.kind]) for candidate in candidates]
