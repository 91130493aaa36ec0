"""Structural context recovered from raw buffer text.

These scans work on possibly malformed, half-typed markup without building a
tree. Each one either finds what it is looking for or returns ``None``; a scan
that runs into contradictory structure stops instead of guessing.
"""

from __future__ import annotations

import re
from typing import Optional

from svgsense.buffer import CancellationToken, Position, TextBuffer, text_before
from svgsense.completion.types import AncestorMatch, AttributeMatch, PrecedingTag, TagMatch
from svgsense.exceptions import CompletionCancelled
from svgsense.logger import get_logger

__all__ = [
    "DEFAULT_CHECK_INTERVAL",
    "find_enclosing_start_tag",
    "find_enclosing_attribute",
    "attribute_at_boundary",
    "find_parent_element",
    "find_preceding_tag",
]

logger = get_logger("completion.resolver")

DEFAULT_CHECK_INTERVAL = 64

_NAME = r"[A-Za-z_][\w:.-]*"
_TAG_NAME = re.compile(_NAME)

# Attribute name directly followed by `=` or `="` at the end of the text
_TRAILING_ASSIGNMENT = re.compile(rf"({_NAME})\s*=\s*\"?$")

_MARKUP = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<[!?][^>]*>"
    rf"|<(?P<closing>/?)(?P<name>{_NAME})(?P<body>(?:[^>\"']|\"[^\"]*\"|'[^']*')*)>",
    re.DOTALL,
)

_NAMED_TAG = re.compile(rf"</?(?P<name>{_NAME})")


def find_enclosing_start_tag(buffer: TextBuffer, position: Position) -> Optional[TagMatch]:
    """Return the start tag the cursor sits in, if it is still open.

    Scans backward from the cursor: reaching ``<`` first means the cursor is
    inside a start tag, reaching ``>`` first means it is not.
    """
    prefix = text_before(buffer, position)
    open_index = prefix.rfind("<")
    if open_index < 0 or prefix.rfind(">") > open_index:
        return None

    tail = prefix[open_index + 1 :]
    name = _TAG_NAME.match(tail)
    if name is None:
        # End tags, comments, declarations or a bare `<`
        return None
    return TagMatch(tag_name=name.group(0), attributes_text=tail[name.end() :])


def attribute_at_boundary(tag: TagMatch) -> Optional[AttributeMatch]:
    """Attribute whose value starts exactly at the end of the typed tag text."""
    match = _TRAILING_ASSIGNMENT.search(tag.attributes_text)
    if match is None:
        return None
    return AttributeMatch(tag_name=tag.tag_name, attribute_name=match.group(1))


def find_enclosing_attribute(buffer: TextBuffer, position: Position) -> Optional[AttributeMatch]:
    """Return the tag and attribute whose value the cursor is at the start of."""
    tag = find_enclosing_start_tag(buffer, position)
    if tag is None:
        return None
    return attribute_at_boundary(tag)


def find_parent_element(
    buffer: TextBuffer,
    position: Position,
    token: Optional[CancellationToken] = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> Optional[AncestorMatch]:
    """Return the nearest element still open at the cursor.

    Walks every tag before the cursor keeping a stack of open elements.
    Self-closing tags, comments, CDATA sections and declarations leave the
    stack alone. An end tag pops back to its most recent matching start tag;
    an end tag with no matching start tag is ignored. Unbalanced start tags
    simply stay on the stack. The token is polled every ``check_interval``
    tags; intervals below one poll on every tag.

    Raises:
        CompletionCancelled: If ``token`` is cancelled during the scan.
    """
    prefix = text_before(buffer, position)
    stack: list[str] = []
    interval = max(1, check_interval)

    for index, match in enumerate(_MARKUP.finditer(prefix)):
        if token is not None and index % interval == 0 and token.is_cancellation_requested:
            logger.debug("Ancestor scan cancelled after {} tags", index)
            raise CompletionCancelled()

        name = match.group("name")
        if name is None:
            continue
        if match.group("closing"):
            if name in stack:
                del stack[len(stack) - 1 - stack[::-1].index(name) :]
        elif not match.group("body").rstrip().endswith("/"):
            stack.append(name)

    if not stack:
        return None
    return AncestorMatch(tag_name=stack[-1])


def find_preceding_tag(buffer: TextBuffer, position: Position) -> Optional[PrecedingTag]:
    """Return the last named start or end tag before the cursor.

    ``None`` means the document holds no tag yet, which is how an empty
    document is recognised. Complete tags are found with the same tokenisation
    as :func:`find_parent_element`, so declarations, processing instructions,
    comments and CDATA sections do not count. A start tag still being typed
    after the last complete one does count, unless it sits in an unterminated
    comment or CDATA section.
    """
    prefix = text_before(buffer, position)
    name = None
    end = 0
    for match in _MARKUP.finditer(prefix):
        name = match.group("name") or name
        end = match.end()

    tail = prefix[end:]
    cut = tail.find("<!")
    if cut >= 0:
        tail = tail[:cut]
    for partial in _NAMED_TAG.finditer(tail):
        name = partial.group("name")

    if name is None:
        return None
    return PrecedingTag(tag_name=name)
