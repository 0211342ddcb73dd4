"""Genus/facet filter matching and filter-token parsing."""

from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, Field

from domain.taxonomy.facets import as_list
from domain.taxonomy.models import Filters, GenusScope, Item

TOKEN_SEPARATOR = "="


class FilterTokenReport(BaseModel):
    """Result of parsing ``key=value`` tokens, including what was discarded."""

    facets: dict[str, list[str]] = Field(default_factory=dict)
    dropped: list[str] = Field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)


def parse_filter_report(tokens: Iterable[str]) -> FilterTokenReport:
    """
    Parse ``key=value`` tokens, keeping a record of malformed ones.

    Each token is split on the first ``=`` and both sides are trimmed.
    Tokens without ``=`` are dropped. Repeated keys accumulate values in
    encounter order.
    """
    report = FilterTokenReport()
    for token in tokens:
        key, sep, value = token.partition(TOKEN_SEPARATOR)
        if not sep:
            report.dropped.append(token)
            continue
        report.facets.setdefault(key.strip(), []).append(value.strip())
    return report


def parse_filter_tokens(tokens: Iterable[str]) -> dict[str, list[str]]:
    """
    Lenient ``key=value`` parsing; malformed tokens are silently discarded.

    Examples:
        >>> parse_filter_tokens(["temperature=hot", "bad-token", "temperature=iced"])
        {'temperature': ['hot', 'iced']}
    """
    return parse_filter_report(tokens).facets


def build_filters(
    genera: Iterable[str] = (),
    facet_tokens: Iterable[str] = (),
    genus_scope: GenusScope = GenusScope.LEADING,
    root_label: str | None = None,
) -> tuple[Filters, FilterTokenReport]:
    """
    Build a Filters value from raw genus names and ``key=value`` tokens.

    ``root_label`` is the taxonomy's hierarchy root, so genus matching can
    look past a classical_path that starts with it.
    """
    report = parse_filter_report(facet_tokens)
    cleaned_genera = {g.strip() for g in genera if g and g.strip()}
    filters = Filters(
        genera=cleaned_genera,
        facet_filters={key: set(values) for key, values in report.facets.items()},
        genus_scope=genus_scope,
        root_label=root_label,
    )
    return filters, report


def _genus_segments(item: Item, root_label: str | None) -> list[str]:
    path = list(item.classical_path)
    if root_label and path and path[0] == root_label:
        return path[1:]
    return path


def _matches_genera(item: Item, filters: Filters) -> bool:
    segments = _genus_segments(item, filters.root_label)
    if not segments:
        return False
    if filters.genus_scope is GenusScope.ANY:
        return any(segment in filters.genera for segment in segments)
    return segments[0] in filters.genera


def _matches_facets(item: Item, facet_filters: Mapping[str, set[str]]) -> bool:
    for dimension, accepted in facet_filters.items():
        values = as_list(item, dimension)
        if not values:
            return False
        if not any(value in accepted for value in values):
            return False
    return True


def matches(item: Item, filters: Filters) -> bool:
    """
    Check whether an item satisfies the filters.

    Genus constraint and facet constraints combine with AND; each is a no-op when empty.
    A leading segment equal to ``filters.root_label`` is skipped before the
    genus comparison.
    """
    if filters.genera and not _matches_genera(item, filters):
        return False
    return _matches_facets(item, filters.facet_filters)


def apply(items: Sequence[Item], filters: Filters) -> list[Item]:
    """Return the matching items in input order (inputs are not mutated)."""
    if filters.is_empty():
        return list(items)
    return [item for item in items if matches(item, filters)]


def describe_filters(filters: Filters) -> str:
    """Render active filters as e.g. ``Genus: Coffee OR Tea; temperature: hot OR iced``."""
    parts: list[str] = []
    if filters.genera:
        parts.append("Genus: " + " OR ".join(sorted(filters.genera)))
    for dimension, values in filters.facet_filters.items():
        parts.append(f"{dimension}: " + " OR ".join(sorted(values)))
    return "; ".join(parts)
