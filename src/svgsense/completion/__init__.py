"""
Context-aware SVG completion.

The pipeline is classify (``classifier``) -> resolve structure from the
buffer (``resolver``) -> generate candidates (``generator``), wired together
by one strategy per context and the ``SvgCompletionProvider``.
"""

from .types import (
    AncestorMatch,
    AttributeMatch,
    CandidateKind,
    CompletionCandidate,
    Context,
    CursorCommand,
    CursorCommandKind,
    PrecedingTag,
    TagMatch,
    TextEdit,
)
from .classifier import classify, classify_position
from .generator import CompletionGenerator
from .strategy import CompletionRequest, CompletionStrategy
from .tag_completion import TagCompletionStrategy
from .attribute_completion import AttributeCompletionStrategy
from .value_completion import AttributeValueCompletionStrategy
from .provider import SvgCompletionProvider
from .applier import ApplyResult, CompletionApplier, move_cursor, to_dropdown_items

__all__ = [
    "AncestorMatch",
    "AttributeMatch",
    "CandidateKind",
    "CompletionCandidate",
    "Context",
    "CursorCommand",
    "CursorCommandKind",
    "PrecedingTag",
    "TagMatch",
    "TextEdit",
    "classify",
    "classify_position",
    "CompletionGenerator",
    "CompletionRequest",
    "CompletionStrategy",
    "TagCompletionStrategy",
    "AttributeCompletionStrategy",
    "AttributeValueCompletionStrategy",
    "SvgCompletionProvider",
    "ApplyResult",
    "CompletionApplier",
    "move_cursor",
    "to_dropdown_items",
]
