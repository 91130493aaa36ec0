"""Exceptions raised by svgsense.

None of these reach a completion caller: the provider converts them into an
empty candidate list. ``SchemaLoadError`` is the exception, raised at startup.
"""

__all__ = ["SvgSenseError", "SchemaLoadError", "CompletionCancelled"]


class SvgSenseError(Exception):
    """Base class for svgsense errors."""


class SchemaLoadError(SvgSenseError):
    """The grammar schema document could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load schema from {path}: {reason}")
        self.path = path
        self.reason = reason


class CompletionCancelled(SvgSenseError):
    """The host cancelled the request while the buffer was being scanned."""
