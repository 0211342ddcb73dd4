"""Browse workflow: validate, filter, sort, and group a loaded taxonomy."""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from domain.query import apply, build_filters, describe_filters, group_by, group_sizes, sort
from domain.query.sorting import NAME_FIELD
from domain.taxonomy import Filters, HybridTaxonomy, Item, TaxonomySchema
from domain.validation import ValidationError, compare_with_schema, validate, validate_against_schema
from infrastructure.config.models import BrowserConfig
from infrastructure.observability import clear_view_context, set_log_context

logger = logging.getLogger(__name__)


class BrowseResult(BaseModel):
    """One query over a taxonomy's items, ready to render."""

    filters: Filters
    items: list[Item] = Field(default_factory=list)
    groups: dict[str, list[Item]] | None = None
    sort_field: str | None = None
    group_field: str | None = None
    dropped_tokens: list[str] = Field(default_factory=list)
    total_items: int = 0

    @property
    def is_grouped(self) -> bool:
        return self.groups is not None


def check_taxonomy(taxonomy: HybridTaxonomy, cfg: BrowserConfig) -> list[ValidationError]:
    """
    Run validation with the configured vocabulary policy and log each problem.

    Args:
        taxonomy: Loaded taxonomy
        cfg: BrowserConfig instance

    Returns:
        All validation problems (empty when the document passes)
    """
    errors = validate(taxonomy, enforce_facet_vocabulary=cfg.validation.enforce_facet_vocabulary)

    if not errors:
        logger.info("Validation passed (%d items checked).", len(taxonomy.items))
        return errors

    logger.warning("Validation found %d problem(s):", len(errors))
    for error in errors:
        logger.warning("  [%s] %s", error.code.value, error)
    return errors


def check_against_schema(document: Any, taxonomy: HybridTaxonomy, schema: TaxonomySchema) -> list[str]:
    """
    Check the raw document against the schema's JSON Schema rules and compare
    its root label and dimensions with the ones the schema declares.

    Args:
        document: Parsed JSON of the taxonomy file
        taxonomy: The same document loaded as a model
        schema: Schema loaded from the schema file

    Returns:
        Problem lines (JSON Schema violations first); empty when the document conforms
    """
    problems = validate_against_schema(schema.json_schema, document)
    problems += compare_with_schema(schema, taxonomy)

    if not problems:
        logger.info("Document conforms to schema '%s'.", schema.schema_id)
        return problems

    logger.warning("Schema '%s' check found %d problem(s):", schema.schema_id, len(problems))
    for problem in problems:
        logger.warning("  %s", problem)
    return problems

def filters_from_input(
    genera: Iterable[str],
    facet_tokens: Iterable[str],
    cfg: BrowserConfig,
    root_label: str | None = None,
) -> tuple[Filters, list[str]]:
    """
    Build Filters from raw user input, using the configured genus scope.

    Pass the taxonomy's ``root_label`` so root-prefixed paths match by their
    first real genus; browse() fills it in when left out.

    Returns:
        Tuple of (filters, dropped facet tokens)
    """
    facet_tokens = list(facet_tokens)
    filters, report = build_filters(
        genera,
        facet_tokens,
        genus_scope=cfg.filtering.genus_scope,
        root_label=root_label,
    )

    if report.dropped and cfg.filtering.warn_on_dropped_tokens:
        for token in report.dropped:
            logger.warning("Ignoring invalid facet filter %r. Expected 'name=value'.", token)

    return filters, list(report.dropped)


def browse(
    taxonomy: HybridTaxonomy,
    filters: Filters,
    cfg: BrowserConfig,
    *,
    sort_field: str | None = None,
    group_field: str | None = None,
    dropped_tokens: list[str] | None = None,
) -> BrowseResult:
    """
    Apply filter -> sort -> group over the taxonomy's items.

    Works on documents that failed validation too; validation is advisory.

    Args:
        taxonomy: Loaded taxonomy (not mutated)
        filters: Query filters
        cfg: BrowserConfig instance (sorting articles)
        sort_field: "name" or a facet dimension; None keeps document order
        group_field: Facet dimension to group by; None for a flat list
        dropped_tokens: Malformed filter tokens to carry into the result

    Returns:
        BrowseResult with matching items and optional groups
    """
    articles = cfg.sorting.leading_articles

    if filters.root_label is None:
        filters = filters.model_copy(update={"root_label": taxonomy.hierarchy.root_label})

    for field, what in ((sort_field, "Sort"), (group_field, "Group")):
        if field and field != NAME_FIELD and field not in taxonomy.facet_dimensions:
            logger.warning("%s field '%s' is not a declared facet dimension.", what, field)

    try:
        set_log_context(view="filter")
        if filters.is_empty():
            logger.debug("No filters active.")
        else:
            logger.info("Active filters: %s", describe_filters(filters))
        items = apply(taxonomy.items, filters)
        logger.info("Matching items: %d of %d", len(items), len(taxonomy.items))

        if sort_field:
            set_log_context(view="sort")
            items = sort(items, sort_field, articles)
            logger.debug("Sorted %d items by %s", len(items), sort_field)

        groups = None
        if group_field:
            set_log_context(view="group")
            groups = group_by(items, group_field, articles)
            logger.info("Grouped by %s into %d bucket(s): %s", group_field, len(groups), group_sizes(groups))
    finally:
        clear_view_context()

    return BrowseResult(
        filters=filters,
        items=items,
        groups=groups,
        sort_field=sort_field,
        group_field=group_field,
        dropped_tokens=list(dropped_tokens or []),
        total_items=len(taxonomy.items),
    )
