"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taxonomy: Pydantic models, facet accessors, and the JSON document codec
- validation: Advisory integrity checks
- query: Filtering, sorting, and grouping of items
"""

from domain.taxonomy import (
    ClassicalHierarchy,
    Filters,
    HierarchyNode,
    HybridTaxonomy,
    Item,
    LoadError,
    as_display_string,
    as_list,
    load,
    save,
)
from domain.validation import ValidationError, validate

__all__ = [
    "HybridTaxonomy",
    "ClassicalHierarchy",
    "HierarchyNode",
    "Item",
    "Filters",
    "LoadError",
    "load",
    "save",
    "as_list",
    "as_display_string",
    "validate",
    "ValidationError",
]
