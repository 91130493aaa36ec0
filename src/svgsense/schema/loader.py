"""Schema document loading.

The grammar is read once per process; ``default_catalog`` is the single
initialisation point for the bundled SVG grammar.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from svgsense.exceptions import SchemaLoadError
from svgsense.logger import get_logger
from svgsense.schema.catalog import SchemaCatalog
from svgsense.schema.models import SchemaDocument

logger = get_logger("schema.loader")

BUNDLED_SCHEMA_PATH = Path(__file__).parent / "data" / "svg.json"


def parse_schema(data: dict, source: str = "<memory>") -> SchemaCatalog:
    """Build a catalog from an already decoded schema document."""
    try:
        document = SchemaDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaLoadError(source, f"invalid schema document ({e.error_count()} errors)") from e
    return SchemaCatalog.from_document(document)


def load_schema(path: Union[str, Path]) -> SchemaCatalog:
    """Load a schema document from a JSON file.

    Raises:
        SchemaLoadError: If the file is missing, is not JSON, or does not
            match the schema document shape.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SchemaLoadError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e

    catalog = parse_schema(data, str(path))
    logger.info(f"Loaded {len(catalog)} elements and {len(catalog.attributes)} global attributes from {path}")
    return catalog


@lru_cache(maxsize=None)
def default_catalog() -> SchemaCatalog:
    """Return the bundled SVG grammar, loading it on first use."""
    return load_schema(BUNDLED_SCHEMA_PATH)


def catalog_for(schema_path: Optional[str]) -> SchemaCatalog:
    """Catalog for a configured schema path, or the bundled one."""
    if schema_path:
        return load_schema(schema_path)
    return default_catalog()
