"""Text buffer and cancellation abstractions supplied by the host editor.

The completion engine only needs line/column addressed reads and a way to
ask whether the current request was abandoned. ``StringBuffer`` and
``CancellationSignal`` are the in-memory implementations used by the CLI,
the textual adapter and the tests.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, Protocol

__all__ = [
    "Position",
    "TextBuffer",
    "StringBuffer",
    "CancellationToken",
    "CancellationSignal",
    "char_before",
    "char_after",
    "text_before",
]


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based cursor position."""

    line: int
    character: int


class TextBuffer(Protocol):
    """Read access to the document being edited."""

    @property
    def line_count(self) -> int:
        """Number of lines; an empty document has one empty line."""

        ...

    def get_text(self, start_line: int, start_col: int, end_line: int, end_col: int) -> str:
        """Return the text between two positions, clamped to the document."""

        ...


class CancellationToken(Protocol):
    """Cooperative cancellation flag polled during long scans."""

    @property
    def is_cancellation_requested(self) -> bool: ...


class CancellationSignal:
    """Thread-safe cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()


class StringBuffer:
    """In-memory ``TextBuffer`` over a string.

    Lines are split on ``\\n``; a trailing ``\\r`` is kept as part of the line
    content, like the raw text would show it.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = [0]
        for index, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(index + 1)

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def _line_length(self, line: int) -> int:
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            return self._line_starts[line + 1] - 1 - start
        return len(self._text) - start

    def offset_at(self, position: Position) -> int:
        """Flat offset of a position, clamping out-of-range values."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self._text)
        column = min(max(position.character, 0), self._line_length(position.line))
        return self._line_starts[position.line] + column

    def position_at(self, offset: int) -> Position:
        offset = min(max(offset, 0), len(self._text))
        line = 0
        # Line starts are sorted; the last start <= offset owns the offset
        for index, start in enumerate(self._line_starts):
            if start > offset:
                break
            line = index
        return Position(line, offset - self._line_starts[line])

    def get_text(self, start_line: int, start_col: int, end_line: int, end_col: int) -> str:
        start = self.offset_at(Position(start_line, start_col))
        end = self.offset_at(Position(end_line, end_col))
        if end < start:
            return ""
        return self._text[start:end]


def text_before(buffer: TextBuffer, position: Position) -> str:
    """Everything from the start of the document up to the cursor."""
    return buffer.get_text(0, 0, position.line, position.character)


def char_before(buffer: TextBuffer, position: Position) -> Optional[str]:
    """The character immediately before the cursor, or None at the document start."""
    if position.character > 0:
        text = buffer.get_text(position.line, position.character - 1, position.line, position.character)
        return text or None
    if position.line > 0:
        return "\n"
    return None


def char_after(buffer: TextBuffer, position: Position) -> Optional[str]:
    """The character immediately after the cursor, or None at the document end."""
    text = buffer.get_text(position.line, position.character, position.line, position.character + 1)
    if text:
        return text
    if position.line + 1 < buffer.line_count:
        return "\n"
    return None
