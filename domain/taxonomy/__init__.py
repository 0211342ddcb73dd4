"""
Taxonomy data model: entities, facet accessors, the JSON document codec, and schema documents.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.facets import as_display_string, as_list, values_of
from domain.taxonomy.loader import LoadError, load, save
from domain.taxonomy.models import (
    ClassicalHierarchy,
    FacetValue,
    Filters,
    GenusScope,
    HierarchyNode,
    HybridTaxonomy,
    Item,
)
from domain.taxonomy.schema import (
    TaxonomySchema,
    TaxonomySchemaError,
    build_schema_from_json,
    extract_classical_hierarchy,
    extract_faceted_dimensions,
    load_schema,
)

__all__ = [
    # Entities
    "HybridTaxonomy",
    "ClassicalHierarchy",
    "HierarchyNode",
    "Item",
    "FacetValue",
    "Filters",
    "GenusScope",
    # Facet accessors
    "as_list",
    "as_display_string",
    "values_of",
    # Document codec
    "load",
    "save",
    "LoadError",
    # Schema documents
    "TaxonomySchema",
    "TaxonomySchemaError",
    "build_schema_from_json",
    "extract_classical_hierarchy",
    "extract_faceted_dimensions",
    "load_schema",
]
