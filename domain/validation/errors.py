"""Advisory validation problem records."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ValidationCode(str, Enum):
    """Kinds of problems reported by validate()."""

    BLANK_ROOT = "blank_root"
    BLANK_GENUS = "blank_genus"
    BLANK_SPECIES = "blank_species"
    DUPLICATE_SIBLING = "duplicate_sibling"
    BLANK_DIMENSION = "blank_dimension"
    BLANK_ALLOWED_VALUE = "blank_allowed_value"
    DUPLICATE_ALLOWED_VALUE = "duplicate_allowed_value"
    RESERVED_ALLOWED_VALUE = "reserved_allowed_value"
    BLANK_ITEM_NAME = "blank_item_name"
    DUPLICATE_ITEM_NAME = "duplicate_item_name"
    UNRESOLVED_PATH = "unresolved_path"
    UNDECLARED_DIMENSION = "undeclared_dimension"
    UNDECLARED_VALUE = "undeclared_value"
    EMPTY_FACET = "empty_facet"


class ValidationError(BaseModel):
    """
    One problem found in a taxonomy document.

    Validation is advisory: these are collected, never raised.
    ``location`` is a human-readable pointer such as ``Item #3 ('Latte')`` or
    ``classical_hierarchy > Coffee > Espresso``.
    """

    model_config = ConfigDict(frozen=True)

    code: ValidationCode
    location: str
    message: str
    item_index: int | None = None
    item_name: str | None = None
    dimension: str | None = None
    path: list[str] | None = None

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"
