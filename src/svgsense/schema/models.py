"""Grammar models for the SVG schema document.

The schema document describes elements, the attributes they accept and the
enumerated values those attributes take. Raw JSON is loose (an attribute entry
may be a bare name or a full definition, an enum value may be a bare string or
an object); these models normalise it once at load time so the rest of the
package works with a single shape.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

__all__ = [
    "EnumValue",
    "AttributeSchema",
    "AttributeRef",
    "InlineAttribute",
    "AttributeEntry",
    "ElementSchema",
    "SchemaDocument",
]


class EnumValue(BaseModel):
    """One permitted value of an enumerated attribute."""

    name: str = Field(..., description="Literal value, or a <placeholder> such as <length>")
    documentation: Optional[str] = Field(None, description="Markdown documentation")

    @property
    def is_placeholder(self) -> bool:
        """Placeholders name a value type and are never inserted literally."""
        return self.name.startswith("<")

    class Config:
        """Pydantic configuration."""

        frozen = True


class AttributeSchema(BaseModel):
    """Definition of a single attribute."""

    name: str = Field(..., description="Attribute name")
    documentation: Optional[str] = Field(None, description="Markdown documentation")
    deprecated: bool = Field(default=False, description="Whether the attribute is deprecated")
    type: Optional[str] = Field(None, description="Descriptive value type, shown as detail")
    enum: Optional[tuple[EnumValue, ...]] = Field(None, description="Enumerated values in declared order")

    @field_validator("enum", mode="before")
    @classmethod
    def _normalise_enum(cls, value: Any) -> Any:
        if value is None:
            return None
        return [{"name": item} if isinstance(item, str) else item for item in value]

    @property
    def has_enum(self) -> bool:
        return bool(self.enum)

    class Config:
        """Pydantic configuration."""

        frozen = True


class AttributeRef(BaseModel):
    """Reference by name to an attribute in the global registry."""

    kind: Literal["ref"] = "ref"
    name: str

    class Config:
        """Pydantic configuration."""

        frozen = True


class InlineAttribute(BaseModel):
    """Attribute defined directly on the element."""

    kind: Literal["inline"] = "inline"
    attribute: AttributeSchema

    @property
    def name(self) -> str:
        return self.attribute.name

    class Config:
        """Pydantic configuration."""

        frozen = True


AttributeEntry = Annotated[Union[AttributeRef, InlineAttribute], Field(discriminator="kind")]


class ElementSchema(BaseModel):
    """Grammar entry for one element."""

    name: str = Field(..., description="Element name")
    documentation: Optional[str] = Field(None, description="Markdown documentation")
    deprecated: bool = Field(default=False, description="Whether the element is deprecated")
    simple: bool = Field(default=False, description="Written as a single self-closing tag")
    inline: bool = Field(default=False, description="Open and close tag on one line, no body")
    sub_elements: Optional[tuple[str, ...]] = Field(
        None,
        alias="subElements",
        description="Children allowed directly inside; None means unrestricted",
    )
    attributes: tuple[AttributeEntry, ...] = Field(default=(), description="Accepted attributes in declared order")

    @field_validator("attributes", mode="before")
    @classmethod
    def _normalise_attributes(cls, value: Any) -> Any:
        if value is None:
            return ()
        entries = []
        for item in value:
            if isinstance(item, str):
                entries.append({"kind": "ref", "name": item})
            elif isinstance(item, dict) and "kind" not in item:
                entries.append({"kind": "inline", "attribute": item})
            else:
                entries.append(item)
        return entries

    class Config:
        """Pydantic configuration."""

        frozen = True
        populate_by_name = True


def _with_names(value: Any) -> Any:
    # Document entries are keyed by name; the models carry the name themselves
    if not isinstance(value, dict):
        return value
    return {
        key: {"name": key, **item} if isinstance(item, dict) and "name" not in item else item
        for key, item in value.items()
    }


class SchemaDocument(BaseModel):
    """Top-level schema document: ``{"elements": {...}, "attributes": {...}}``."""

    elements: dict[str, ElementSchema] = Field(default_factory=dict)
    attributes: dict[str, AttributeSchema] = Field(default_factory=dict)

    @field_validator("elements", "attributes", mode="before")
    @classmethod
    def _inject_names(cls, value: Any) -> Any:
        return _with_names(value)
