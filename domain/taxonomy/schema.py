"""Taxonomy schemas: a JSON Schema document that also declares the hierarchy and dimensions."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from domain.taxonomy.models import ClassicalHierarchy

DEFAULT_SCHEMA_ID = "unknown"
DEFAULT_SCHEMA_TITLE = "Untitled Taxonomy"

_DIMENSIONS_ADAPTER = TypeAdapter(dict[str, list[str]])


class TaxonomySchemaError(ValueError):
    """Raised when a schema document lacks or mangles the taxonomy sections."""


class TaxonomySchema(BaseModel):
    """
    Metadata, classical hierarchy and facet dimensions taken from a schema file.

    ``json_schema`` keeps the whole source document so instance documents can
    be checked against it with validate_against_schema().
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_id: str = Field(default=DEFAULT_SCHEMA_ID, alias="$id")
    title: str = DEFAULT_SCHEMA_TITLE
    description: str | None = None
    hierarchy: ClassicalHierarchy = Field(..., alias="classical_hierarchy")
    facet_dimensions: dict[str, list[str]] = Field(..., alias="faceted_dimensions")
    json_schema: dict[str, Any] = Field(default_factory=dict, exclude=True)


def extract_classical_hierarchy(json_schema: Mapping[str, Any]) -> ClassicalHierarchy:
    """Read the top-level ``classical_hierarchy`` property of a schema document."""
    if "classical_hierarchy" not in json_schema:
        raise TaxonomySchemaError("JSON Schema missing 'classical_hierarchy' property")
    try:
        return ClassicalHierarchy.model_validate(json_schema["classical_hierarchy"])
    except PydanticValidationError as e:
        raise TaxonomySchemaError(f"Failed to parse classical_hierarchy: {e}") from e


def extract_faceted_dimensions(json_schema: Mapping[str, Any]) -> dict[str, list[str]]:
    """Read the top-level ``faceted_dimensions`` property of a schema document."""
    if "faceted_dimensions" not in json_schema:
        raise TaxonomySchemaError("JSON Schema missing 'faceted_dimensions' property")
    try:
        return _DIMENSIONS_ADAPTER.validate_python(json_schema["faceted_dimensions"])
    except PydanticValidationError as e:
        raise TaxonomySchemaError(f"Failed to parse faceted_dimensions: {e}") from e


def build_schema_from_json(json_schema: Mapping[str, Any]) -> TaxonomySchema:
    """
    Build a TaxonomySchema from an already-parsed schema document.

    ``$id`` and ``title`` fall back to defaults; ``description`` is optional.

    Raises:
        TaxonomySchemaError: If the hierarchy or dimensions are missing or malformed
    """
    hierarchy = extract_classical_hierarchy(json_schema)
    dimensions = extract_faceted_dimensions(json_schema)

    schema_id = json_schema.get("$id")
    title = json_schema.get("title")
    description = json_schema.get("description")

    return TaxonomySchema(
        schema_id=schema_id if isinstance(schema_id, str) else DEFAULT_SCHEMA_ID,
        title=title if isinstance(title, str) else DEFAULT_SCHEMA_TITLE,
        description=description if isinstance(description, str) else None,
        hierarchy=hierarchy,
        facet_dimensions=dimensions,
        json_schema=dict(json_schema),
    )


def load_schema(data: bytes | str) -> TaxonomySchema:
    """
    Parse a schema document (pure; file reading happens in infrastructure.io).

    Raises:
        TaxonomySchemaError: If the bytes are not a JSON object or lack the taxonomy sections
    """
    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as e:
        raise TaxonomySchemaError(f"Schema is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise TaxonomySchemaError(f"Expected a JSON object for the schema, got {type(parsed).__name__}")

    return build_schema_from_json(parsed)
