"""svgsense: context-aware completion for SVG markup."""

from svgsense.buffer import CancellationSignal, Position, StringBuffer
from svgsense.completion import CompletionCandidate, SvgCompletionProvider
from svgsense.config import CompletionSettings, load_settings
from svgsense.schema import SchemaCatalog, default_catalog, load_schema

__all__ = [
    "CancellationSignal",
    "Position",
    "StringBuffer",
    "CompletionCandidate",
    "SvgCompletionProvider",
    "CompletionSettings",
    "load_settings",
    "SchemaCatalog",
    "default_catalog",
    "load_schema",
]
