"""JSON Schema validation of raw documents, and schema/document drift checks."""

from collections.abc import Mapping
from typing import Any

from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from domain.taxonomy.models import HybridTaxonomy
from domain.taxonomy.schema import TaxonomySchema


def _instance_location(error) -> str:
    parts = [str(part) for part in error.absolute_path]
    return "/" + "/".join(parts) if parts else "root"


def validate_against_schema(schema: Mapping[str, Any], data: Any) -> list[str]:
    """
    Validate a parsed JSON document against a JSON Schema.

    The draft is picked from the schema's ``$schema`` keyword (latest draft
    when absent). Keys the draft does not know, such as
    ``classical_hierarchy``, are ignored.

    Args:
        schema: JSON Schema document
        data: Parsed instance document

    Returns:
        One ``"<message> at <location>"`` line per violation, ordered by
        location; a single compilation message when the schema itself is
        invalid; an empty list when the document conforms
    """
    validator_cls = validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        return [f"Schema compilation error: {e.message}"]

    validator = validator_cls(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    return [f"{error.message} at {_instance_location(error)}" for error in errors]


def compare_with_schema(schema: TaxonomySchema, taxonomy: HybridTaxonomy) -> list[str]:
    """
    Report where a document's hierarchy root and dimensions disagree with its schema.

    Returns:
        Human-readable differences; empty when root label and every
        dimension's allowed values match
    """
    problems: list[str] = []

    if schema.hierarchy.root_label != taxonomy.hierarchy.root_label:
        problems.append(
            f"classical_hierarchy root '{taxonomy.hierarchy.root_label}' "
            f"differs from schema root '{schema.hierarchy.root_label}'"
        )

    for dimension, allowed in schema.facet_dimensions.items():
        declared = taxonomy.facet_dimensions.get(dimension)
        if declared is None:
            problems.append(f"faceted_dimensions is missing schema dimension '{dimension}'")
            continue
        missing = [value for value in allowed if value not in declared]
        extra = [value for value in declared if value not in allowed]
        if missing:
            problems.append(f"facet '{dimension}' lacks schema values: {', '.join(missing)}")
        if extra:
            problems.append(f"facet '{dimension}' has values not in schema: {', '.join(extra)}")

    for dimension in taxonomy.facet_dimensions:
        if dimension not in schema.facet_dimensions:
            problems.append(f"facet '{dimension}' is not declared by schema '{schema.schema_id}'")

    return problems
