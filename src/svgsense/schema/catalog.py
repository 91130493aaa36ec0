"""Read-only lookups over the SVG grammar."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from svgsense.schema.models import AttributeSchema, ElementSchema, SchemaDocument

__all__ = ["SchemaCatalog"]


class SchemaCatalog:
    """Immutable view over elements and the global attribute registry.

    Lookups never raise; a missing entry is reported as ``None``. Element
    order is the order of the schema document, which is also the order of
    unrestricted tag suggestions.

    Example:
        >>> catalog = SchemaCatalog.from_document(SchemaDocument(elements={"g": {}}))
        >>> catalog.lookup_element("g").name
        'g'
        >>> catalog.lookup_element("nope") is None
        True
    """

    def __init__(
        self,
        elements: Mapping[str, ElementSchema],
        attributes: Optional[Mapping[str, AttributeSchema]] = None,
    ) -> None:
        self._elements = MappingProxyType(dict(elements))
        self._attributes = MappingProxyType(dict(attributes or {}))

    @classmethod
    def from_document(cls, document: SchemaDocument) -> "SchemaCatalog":
        return cls(document.elements, document.attributes)

    @property
    def elements(self) -> Mapping[str, ElementSchema]:
        return self._elements

    @property
    def attributes(self) -> Mapping[str, AttributeSchema]:
        return self._attributes

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, name: object) -> bool:
        return name in self._elements

    def element_names(self) -> Iterator[str]:
        return iter(self._elements)

    def lookup_element(self, name: str) -> Optional[ElementSchema]:
        return self._elements.get(name)

    def lookup_attribute(self, name: str) -> Optional[AttributeSchema]:
        """Look up ``name`` in the global attribute registry only."""
        return self._attributes.get(name)

    def attribute_names(self, element_name: str) -> list[str]:
        """Names of the attributes declared on an element, in declared order."""
        element = self.lookup_element(element_name)
        if element is None:
            return []
        return [entry.name for entry in element.attributes]

    def resolve_element_attribute(self, element_name: str, attr_name: str) -> Optional[AttributeSchema]:
        """Resolve the definition of ``attr_name`` as used on ``element_name``.

        An inline definition on the element wins over a bare reference; a bare
        reference resolves through the global registry. When the element does
        not declare the attribute at all (or is unknown), the global registry
        is consulted directly.
        """
        element = self.lookup_element(element_name)
        if element is not None:
            for entry in element.attributes:
                if entry.kind == "inline" and entry.name == attr_name:
                    return entry.attribute
        # Bare references and undeclared attributes both resolve globally
        return self.lookup_attribute(attr_name)
