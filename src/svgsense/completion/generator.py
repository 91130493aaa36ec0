"""Candidate generation from schema lookups and resolved context."""

from __future__ import annotations

from typing import Optional

from svgsense.buffer import Position
from svgsense.completion.types import (
    AncestorMatch,
    CandidateKind,
    CompletionCandidate,
    CursorCommand,
    CursorCommandKind,
    TextEdit,
)
from svgsense.logger import get_logger
from svgsense.schema import AttributeSchema, ElementSchema, SchemaCatalog

__all__ = ["CompletionGenerator", "ROOT_ELEMENT", "ROOT_SKELETON", "DEPRECATED_LABEL", "DEPRECATED_SUFFIX"]

logger = get_logger("completion.generator")

ROOT_ELEMENT = "svg"
ROOT_SKELETON = 'svg xmlns="http://www.w3.org/2000/svg">\n\t\n</svg'

DEPRECATED_LABEL = "DEPRECATED"
DEPRECATED_SUFFIX = "\n\n**DEPRECATED**"


def _documentation(documentation: Optional[str], deprecated: bool) -> Optional[str]:
    if not documentation:
        return None
    if deprecated:
        return documentation + DEPRECATED_SUFFIX
    return documentation


class CompletionGenerator:
    """Builds ordered candidate lists for each completion context."""

    def __init__(self, catalog: SchemaCatalog, show_deprecated: bool = True) -> None:
        self._catalog = catalog
        self._show_deprecated = show_deprecated

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def element_candidate(self, name: str, element: Optional[ElementSchema]) -> CompletionCandidate:
        """Candidate for one element, with the insertion template for its kind.

        The caller has already typed ``<``. Block elements omit the final
        ``>`` of the end tag because the editor supplies it.
        """
        deprecated = element is not None and element.deprecated
        documentation = _documentation(element.documentation, deprecated) if element else None
        detail = DEPRECATED_LABEL if deprecated else None

        if element is not None and element.simple:
            insert_text = f"{name} /"
            command = CursorCommand(CursorCommandKind.MOVE_LEFT, offset=1)
        elif element is not None and element.inline:
            insert_text = f"{name}></{name}>"
            command = CursorCommand(CursorCommandKind.MOVE_LEFT, offset=len(name) + 3)
        else:
            insert_text = f"{name}>\n\t\n</{name}"
            command = CursorCommand(CursorCommandKind.MOVE_UP, offset=1)

        return CompletionCandidate(
            label=name,
            kind=CandidateKind.ELEMENT,
            detail=detail,
            documentation=documentation,
            insert_text=insert_text,
            command=command,
        )

    def root_candidate(self, position: Optional[Position] = None) -> CompletionCandidate:
        """The ``svg`` root with its namespace and end tag, for an empty document.

        With a cursor position the skeleton is a literal text edit at that
        position; without one it is a plain insertion template.
        """
        base = self.element_candidate(ROOT_ELEMENT, self._catalog.lookup_element(ROOT_ELEMENT))
        return CompletionCandidate(
            label=base.label,
            kind=base.kind,
            detail=base.detail,
            documentation=base.documentation,
            insert_text=ROOT_SKELETON if position is None else None,
            text_edit=TextEdit.insert(position, ROOT_SKELETON) if position is not None else None,
            command=CursorCommand(CursorCommandKind.MOVE_UP, offset=1),
        )

    def generate_tag_completions(
        self,
        ancestor: Optional[AncestorMatch],
        document_is_empty: bool,
        position: Optional[Position] = None,
    ) -> list[CompletionCandidate]:
        """Element candidates for a freshly typed ``<``.

        An empty document only gets the root skeleton. Otherwise the children
        allowed inside ``ancestor`` are offered in declared order; when the
        ancestor is unknown or unrestricted, every element is offered in
        catalog order.
        """
        if document_is_empty:
            return [self.root_candidate(position)]

        parent = self._catalog.lookup_element(ancestor.tag_name) if ancestor else None
        if parent is not None and parent.sub_elements is not None:
            names = list(parent.sub_elements)
            logger.debug("Restricting tags to {} children of <{}>", len(names), parent.name)
        else:
            if ancestor is not None and parent is None:
                logger.debug("Unknown ancestor <{}>, offering every element", ancestor.tag_name)
            names = list(self._catalog.element_names())

        candidates = []
        for name in names:
            element = self._catalog.lookup_element(name)
            if element is not None and element.deprecated and not self._show_deprecated:
                continue
            candidates.append(self.element_candidate(name, element))
        return candidates

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def attribute_candidate(self, name: str, attribute: Optional[AttributeSchema]) -> CompletionCandidate:
        detail = None
        documentation = None
        has_enum = False
        if attribute is not None:
            if attribute.type:
                detail = attribute.type
            elif attribute.deprecated:
                detail = DEPRECATED_LABEL
            documentation = _documentation(attribute.documentation, attribute.deprecated)
            has_enum = attribute.has_enum

        return CompletionCandidate(
            label=name,
            kind=CandidateKind.ATTRIBUTE,
            detail=detail,
            documentation=documentation,
            insert_text=f'{name}=""',
            command=CursorCommand(CursorCommandKind.MOVE_LEFT, offset=1, has_enum_follow_up=has_enum),
        )

    def generate_attribute_completions(self, tag_name: str, attributes_text: str) -> list[CompletionCandidate]:
        """Attribute candidates for ``tag_name``, minus those already typed.

        An attribute counts as typed when ``attributes_text`` contains
        `` name=``; the leading space keeps ``class=`` from hiding ``classid``.
        """
        element = self._catalog.lookup_element(tag_name)
        if element is None:
            logger.debug("No schema for <{}>, no attribute candidates", tag_name)
            return []

        candidates = []
        for entry in element.attributes:
            name = entry.name
            if f" {name}=" in attributes_text:
                continue
            attribute = self._catalog.resolve_element_attribute(tag_name, name)
            if attribute is not None and attribute.deprecated and not self._show_deprecated:
                continue
            candidates.append(self.attribute_candidate(name, attribute))
        return candidates

    # ------------------------------------------------------------------
    # Attribute values
    # ------------------------------------------------------------------

    def generate_enum_completions(self, attribute: Optional[AttributeSchema]) -> list[CompletionCandidate]:
        """Value candidates for an enumerated attribute, skipping placeholders."""
        if attribute is None or not attribute.enum:
            return []
        return [
            CompletionCandidate(
                label=value.name,
                kind=CandidateKind.VALUE,
                documentation=value.documentation,
                command=CursorCommand(CursorCommandKind.MOVE_RIGHT_PAST_ATTRIBUTE, offset=1),
            )
            for value in attribute.enum
            if not value.is_placeholder
        ]
