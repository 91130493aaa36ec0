"""Value types produced and consumed by the completion engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from svgsense.buffer import Position

__all__ = [
    "Context",
    "CandidateKind",
    "CursorCommandKind",
    "CursorCommand",
    "TextEdit",
    "CompletionCandidate",
    "TagMatch",
    "AttributeMatch",
    "AncestorMatch",
    "PrecedingTag",
]


class Context(Enum):
    """What the author is typing at the cursor."""

    TAG_OPEN = "tag_open"
    ATTRIBUTE_NAME = "attribute_name"
    ATTRIBUTE_VALUE = "attribute_value"
    NONE = "none"


class CandidateKind(Enum):
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    VALUE = "value"


class CursorCommandKind(Enum):
    """Cursor movement to perform once a candidate has been inserted."""

    MOVE_LEFT = "cursor_move_left"
    MOVE_UP = "cursor_move_up"
    MOVE_RIGHT_PAST_ATTRIBUTE = "cursor_move_right_past_attribute"


@dataclass(frozen=True, slots=True)
class CursorCommand:
    """Post-insertion cursor instruction, executed by the host."""

    kind: CursorCommandKind
    offset: int = 1
    has_enum_follow_up: bool = False
    """Set when value completion should be offered right after the move."""


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Literal replacement of ``start``..``end`` with ``new_text``."""

    start: Position
    end: Position
    new_text: str

    @classmethod
    def insert(cls, position: Position, new_text: str) -> "TextEdit":
        return cls(start=position, end=position, new_text=new_text)


@dataclass(frozen=True, slots=True)
class CompletionCandidate:
    """One proposed completion."""

    label: str
    kind: CandidateKind
    detail: Optional[str] = None
    documentation: Optional[str] = None
    insert_text: Optional[str] = None
    text_edit: Optional[TextEdit] = None
    command: Optional[CursorCommand] = None

    @property
    def insertion(self) -> str:
        """Text that ends up in the document when the candidate is accepted."""
        if self.text_edit is not None:
            return self.text_edit.new_text
        if self.insert_text is not None:
            return self.insert_text
        return self.label


@dataclass(frozen=True, slots=True)
class TagMatch:
    """Start tag the cursor is inside of."""

    tag_name: str
    attributes_text: str
    """Raw text between the tag name and the cursor."""


@dataclass(frozen=True, slots=True)
class AttributeMatch:
    """Attribute whose value is being typed."""

    tag_name: str
    attribute_name: str


@dataclass(frozen=True, slots=True)
class AncestorMatch:
    """Nearest element still open at the cursor."""

    tag_name: str


@dataclass(frozen=True, slots=True)
class PrecedingTag:
    """Last named tag before the cursor."""

    tag_name: str
