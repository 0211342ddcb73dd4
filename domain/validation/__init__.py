"""
Taxonomy validation: structural and referential integrity checks.

Validation is advisory. validate() never raises and returns every problem
found; documents with problems stay loadable and queryable. Raw documents
can also be checked against a JSON Schema file.
"""

from domain.validation.checks import (
    check_dimensions,
    check_facet_vocabulary,
    check_hierarchy,
    check_item_facet_keys,
    check_item_names,
    check_item_paths,
    resolve_path,
    validate,
)
from domain.validation.errors import ValidationCode, ValidationError
from domain.validation.schema_validation import compare_with_schema, validate_against_schema

__all__ = [
    "validate",
    "ValidationError",
    "ValidationCode",
    # Individual checks
    "check_hierarchy",
    "check_dimensions",
    "check_item_names",
    "check_item_paths",
    "check_item_facet_keys",
    "check_facet_vocabulary",
    "resolve_path",
    # JSON Schema
    "validate_against_schema",
    "compare_with_schema",
]
