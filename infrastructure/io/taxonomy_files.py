"""Reading and writing taxonomy JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

from domain.taxonomy import HybridTaxonomy, LoadError, TaxonomySchema, load, load_schema, save
from infrastructure.io.fs import ensure_exists

logger = logging.getLogger(__name__)


def read_taxonomy_file(path: Path) -> HybridTaxonomy:
    """
    Read and parse a taxonomy document.

    This function handles file I/O, then delegates parsing to the domain layer.

    Raises:
        FileNotFoundError: If the file does not exist
        LoadError: If the file content is not a well-shaped taxonomy document
    """
    ensure_exists(path, "taxonomy file")

    taxonomy = load(path.read_bytes())
    logger.info(
        "Loaded taxonomy from %s: %d top-level nodes, %d dimensions, %d items",
        path,
        len(taxonomy.hierarchy.children),
        len(taxonomy.facet_dimensions),
        len(taxonomy.items),
    )
    return taxonomy


def write_taxonomy_file(path: Path, taxonomy: HybridTaxonomy) -> Path:
    """Serialize a taxonomy and write it to ``path`` (parent directories are created)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(save(taxonomy))
    logger.info("Saved taxonomy JSON: %s", path)
    return path


def read_document_json(path: Path) -> Any:
    """
    Read a taxonomy document as plain JSON, for JSON Schema validation.

    Raises:
        FileNotFoundError: If the file does not exist
        LoadError: If the file is not valid JSON
    """
    ensure_exists(path, "taxonomy file")
    try:
        return json.loads(path.read_bytes())
    except json.JSONDecodeError as e:
        raise LoadError(f"Malformed taxonomy document: {e}", problems=[str(e)]) from e


def read_schema_file(path: Path) -> TaxonomySchema:
    """
    Read a schema file declaring the hierarchy, dimensions and JSON Schema rules.

    Raises:
        FileNotFoundError: If the file does not exist
        TaxonomySchemaError: If the file is not a usable schema document
    """
    ensure_exists(path, "schema file")
    schema = load_schema(path.read_bytes())
    logger.info("Loaded schema '%s' (%s) from %s", schema.title, schema.schema_id, path)
    return schema
