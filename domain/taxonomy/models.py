"""Pydantic models for hybrid taxonomy documents."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

# A facet holds either one value or several; the loaded shape is kept as-is.
FacetValue = str | list[str]


def _drop_unset_defaults(model: BaseModel, data: dict[str, Any], names: tuple[str, ...]) -> dict[str, Any]:
    """Omit optional fields that were absent in the source and are still empty."""
    for name in names:
        if name in model.model_fields_set or getattr(model, name):
            continue
        alias = type(model).model_fields[name].alias
        data.pop(alias if alias in data else name, None)
    return data


class HierarchyNode(BaseModel):
    """One genus/species node of the classical tree."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    genus: str
    species: str
    differentia: str | None = None
    children: list["HierarchyNode"] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _drop_unset_defaults(self, handler(self), ("differentia", "children"))


class ClassicalHierarchy(BaseModel):
    """Top of the classification tree. The root is only a label."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    root_label: str = Field(..., alias="root")
    children: list[HierarchyNode] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _drop_unset_defaults(self, handler(self), ("children",))


class Item(BaseModel):
    """A classified entity placed in the tree and along the facet dimensions."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    classical_path: list[str]
    facets: dict[str, FacetValue]


class HybridTaxonomy(BaseModel):
    """
    Root aggregate of a taxonomy document.

    Field aliases are the JSON names of the persisted document; unknown
    top-level keys are kept in ``model_extra`` and written back on save.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    description: str | None = Field(default=None, alias="taxonomy_description")
    hierarchy: ClassicalHierarchy = Field(..., alias="classical_hierarchy")
    facet_dimensions: dict[str, list[str]] = Field(..., alias="faceted_dimensions")
    items: list[Item] = Field(default_factory=list, alias="example_items")

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return _drop_unset_defaults(self, handler(self), ("description", "items"))


class GenusScope(str, Enum):
    """Which classical_path segments a genus filter is matched against."""

    LEADING = "leading"
    ANY = "any"


class Filters(BaseModel):
    """Query filters: OR within genera, OR within a dimension, AND across."""

    genera: set[str] = Field(default_factory=set)
    facet_filters: dict[str, set[str]] = Field(default_factory=dict)
    genus_scope: GenusScope = GenusScope.LEADING
    # Hierarchy root; a classical_path starting with it is matched from the next segment.
    root_label: str | None = None

    def is_empty(self) -> bool:
        return not self.genera and not self.facet_filters
