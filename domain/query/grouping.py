"""Facet-based grouping with multi-membership."""

from collections.abc import Iterable, Mapping, Sequence

from domain.query.sorting import DEFAULT_LEADING_ARTICLES, sort_key
from domain.taxonomy.facets import as_list
from domain.taxonomy.models import Item

# Bucket for items with no value in the grouped dimension.
UNGROUPED = "_unspecified_"


def sorted_group_names(
    names: Iterable[str],
    articles: Iterable[str] = DEFAULT_LEADING_ARTICLES,
) -> list[str]:
    """Order group keys like item names; the ungrouped bucket always comes last."""
    articles = tuple(articles)
    return sorted(names, key=lambda name: (name == UNGROUPED, sort_key(name, articles), name))


def group_by(
    items: Sequence[Item],
    dimension: str,
    articles: Iterable[str] = DEFAULT_LEADING_ARTICLES,
) -> dict[str, list[Item]]:
    """
    Partition items into one bucket per value of ``dimension``.

    An item with several values lands in several buckets; an item without
    any value lands in the ``UNGROUPED`` bucket, so nothing is dropped.
    Within a bucket, items keep their input order.

    Args:
        items: Items to group (not mutated)
        dimension: Facet dimension to group on
        articles: Leading articles ignored when ordering the bucket keys

    Returns:
        Mapping of bucket key -> items, keys in display order
    """
    buckets: dict[str, list[Item]] = {}

    for item in items:
        values = as_list(item, dimension)
        if not values:
            buckets.setdefault(UNGROUPED, []).append(item)
            continue
        for value in dict.fromkeys(values):
            buckets.setdefault(value, []).append(item)

    return {name: buckets[name] for name in sorted_group_names(buckets, articles)}


def group_sizes(groups: Mapping[str, Sequence[Item]]) -> dict[str, int]:
    return {name: len(members) for name, members in groups.items()}
