"""
Strategy interfaces for context-specific completion.

Each completion context (tag name, attribute name, attribute value) is served
by its own strategy, selected by the provider from the classified request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from textual_autocomplete import TargetState

from svgsense.buffer import CancellationToken, Position, StringBuffer, TextBuffer, char_after, char_before
from svgsense.completion.classifier import classify
from svgsense.completion.types import CompletionCandidate, Context


@dataclass(slots=True)
class CompletionRequest:
    """Snapshot of the buffer and cursor used by completion strategies."""

    buffer: TextBuffer
    position: Position
    token: Optional[CancellationToken] = None
    prev_char: Optional[str] = field(init=False, default=None)
    next_char: Optional[str] = field(init=False, default=None)
    context: Context = field(init=False, default=Context.NONE)

    def __post_init__(self) -> None:
        self.prev_char = char_before(self.buffer, self.position)
        self.next_char = char_after(self.buffer, self.position)
        self.context = classify(self.prev_char, self.next_char)

    @property
    def cancelled(self) -> bool:
        return self.token is not None and self.token.is_cancellation_requested

    @classmethod
    def from_target_state(
        cls, state: TargetState, token: Optional[CancellationToken] = None
    ) -> "CompletionRequest":
        """Build a request from a textual-autocomplete target (flat text + offset)."""
        buffer = StringBuffer(state.text)
        return cls(buffer, buffer.position_at(state.cursor_position), token)


class CompletionStrategy(Protocol):
    """Contract implemented by all completion strategies."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this strategy should produce candidates."""

        ...

    def get_candidates(self, request: CompletionRequest) -> list[CompletionCandidate]:
        """Return candidates for the current request."""

        ...
