"""SVG grammar schema: models, catalog and loading."""

from svgsense.schema.catalog import SchemaCatalog
from svgsense.schema.loader import catalog_for, default_catalog, load_schema, parse_schema
from svgsense.schema.models import (
    AttributeEntry,
    AttributeRef,
    AttributeSchema,
    ElementSchema,
    EnumValue,
    InlineAttribute,
    SchemaDocument,
)

__all__ = [
    "SchemaCatalog",
    "catalog_for",
    "default_catalog",
    "load_schema",
    "parse_schema",
    "AttributeEntry",
    "AttributeRef",
    "AttributeSchema",
    "ElementSchema",
    "EnumValue",
    "InlineAttribute",
    "SchemaDocument",
]
