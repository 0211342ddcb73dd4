"""Normalized access to facet values.

Every consumer (validation, filtering, sorting, grouping, rendering) reads
facets through these two functions instead of branching on the
single-string / list shape itself.
"""

from domain.taxonomy.models import FacetValue, Item

DISPLAY_SEPARATOR = ", "


def values_of(value: FacetValue | None) -> list[str]:
    """Normalize a raw facet value to a list, preserving declared order."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def as_list(item: Item, dimension: str) -> list[str]:
    """
    Return the item's values for ``dimension`` as a list.

    Examples:
        >>> item = Item(name="Latte", classical_path=[], facets={"temperature": "hot"})
        >>> as_list(item, "temperature")
        ['hot']
        >>> as_list(item, "origin")
        []
    """
    return values_of(item.facets.get(dimension))


def as_display_string(item: Item, dimension: str) -> str | None:
    """Human-facing summary of a facet; ``None`` when absent or empty."""
    values = as_list(item, dimension)
    if not values:
        return None
    return DISPLAY_SEPARATOR.join(values)
