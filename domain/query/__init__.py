"""
Item queries: filtering, library-catalog sorting, and facet grouping.

Provides:
- Genus/facet filter matching and lenient key=value token parsing
- Deterministic article-insensitive sorting
- Multi-membership grouping by facet value

Most functions are pure; the *_and_save table helper writes a CSV to disk.
"""

from domain.query.filtering import (
    FilterTokenReport,
    apply,
    build_filters,
    describe_filters,
    matches,
    parse_filter_report,
    parse_filter_tokens,
)
from domain.query.grouping import UNGROUPED, group_by, group_sizes, sorted_group_names
from domain.query.sorting import DEFAULT_LEADING_ARTICLES, NAME_FIELD, sort, sort_key, strip_leading_article
from domain.query.tables import group_summary_table, group_summary_table_and_save

__all__ = [
    # Filtering
    "matches",
    "apply",
    "parse_filter_tokens",
    "parse_filter_report",
    "build_filters",
    "describe_filters",
    "FilterTokenReport",
    # Sorting
    "sort",
    "sort_key",
    "strip_leading_article",
    "NAME_FIELD",
    "DEFAULT_LEADING_ARTICLES",
    # Grouping
    "group_by",
    "group_sizes",
    "sorted_group_names",
    "UNGROUPED",
    # Tables
    "group_summary_table",
    "group_summary_table_and_save",
]
