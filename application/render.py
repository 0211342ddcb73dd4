"""Markdown views of a taxonomy, a browse result, and validation problems."""

import json
from collections.abc import Sequence

from application.browse import BrowseResult
from application.constants import PATH_ARROW, UNGROUPED_LABEL
from domain.query import UNGROUPED
from domain.taxonomy import HierarchyNode, HybridTaxonomy, Item, as_display_string
from domain.validation import ValidationError


def _render_extra_value(value: object, indent: int, lines: list[str]) -> None:
    pad = "  " * indent
    if isinstance(value, list):
        for element in value:
            if isinstance(element, str):
                lines.append(f"{pad}- {element}")
            else:
                _render_extra_value(element, indent + 1, lines)
    elif isinstance(value, str):
        lines.append(f"{pad}{value}")
    else:
        lines.append(f"{pad}{json.dumps(value, ensure_ascii=False)}")


def _render_node(node: HierarchyNode, depth: int, lines: list[str]) -> None:
    pad = "  " * depth
    lines.append(f"{pad}* **{node.species}**")
    lines.append(f"{pad}  - Genus: {node.genus}")
    if node.differentia:
        lines.append(f"{pad}  - Differentia: {node.differentia}")
    for child in node.children:
        _render_node(child, depth + 1, lines)


def render_item(item: Item) -> str:
    """One item: heading, classical path, facets sorted by dimension, and any extra fields."""
    lines = [f"### {item.name}", ""]
    lines.append(f"**Path:** {PATH_ARROW.join(item.classical_path)}")
    lines.append("")
    lines.append("**Facets:**")
    lines.append("")
    for dimension in sorted(item.facets):
        shown = as_display_string(item, dimension)
        if shown is not None:
            lines.append(f"- {dimension}: {shown}")

    for key, value in (item.model_extra or {}).items():
        lines.append("")
        lines.append(f"**{key}:** {json.dumps(value, ensure_ascii=False)}")

    lines.append("")
    return "\n".join(lines)


def render_taxonomy(taxonomy: HybridTaxonomy) -> str:
    """Full document view: description, hierarchy tree, dimensions, items, extra sections."""
    lines = ["# Hybrid Taxonomy", ""]

    if taxonomy.description:
        lines += ["## Description", "", taxonomy.description, ""]

    lines += ["## Classical Hierarchy", "", f"**Root:** {taxonomy.hierarchy.root_label}", ""]
    for child in taxonomy.hierarchy.children:
        _render_node(child, 1, lines)

    lines += ["", "## Faceted Dimensions", ""]
    for dimension in sorted(taxonomy.facet_dimensions):
        lines += [f"### {dimension}", ""]
        lines += [f"- {value}" for value in taxonomy.facet_dimensions[dimension]]
        lines.append("")

    if taxonomy.items:
        lines += ["## Example Items", ""]
        lines += [render_item(item) for item in taxonomy.items]

    extra = taxonomy.model_extra or {}
    if extra:
        lines += ["## Additional Information", ""]
        for key, value in extra.items():
            lines += [f"### {key}", ""]
            _render_extra_value(value, 0, lines)
            lines.append("")

    return "\n".join(lines)


def render_results(result: BrowseResult) -> str:
    """Filtered/sorted/grouped view in the same Markdown style as render_taxonomy."""
    lines = ["# Filtered Results", ""]
    filters = result.filters

    if not filters.is_empty():
        lines += ["## Active Filters", ""]
        if filters.genera:
            lines.append(f"- **Genus:** {' OR '.join(sorted(filters.genera))}")
        for dimension, values in filters.facet_filters.items():
            lines.append(f"- **{dimension}:** {' OR '.join(sorted(values))}")
        lines.append("")

    if result.sort_field:
        lines += [f"**Sorted by:** {result.sort_field}", ""]
    if result.group_field:
        lines += [f"**Grouped by:** {result.group_field}", ""]

    lines += [f"**Matching Items:** {len(result.items)}", ""]

    if not result.items:
        lines += ["_No items match the specified filters._", ""]
        return "\n".join(lines)

    if result.groups is None:
        lines += [render_item(item) for item in result.items]
        return "\n".join(lines)

    for value, members in result.groups.items():
        label = UNGROUPED_LABEL if value == UNGROUPED else value
        lines += [f"## {result.group_field}: {label}", ""]
        lines += [render_item(item) for item in members]

    return "\n".join(lines)


def render_validation_errors(errors: Sequence[ValidationError]) -> str:
    """Numbered problem list; empty string when there is nothing to report."""
    if not errors:
        return ""
    lines = ["Schema validation failed:", ""]
    lines += [f"  {number}. {error}" for number, error in enumerate(errors, start=1)]
    return "\n".join(lines)


def render_schema_problems(problems: Sequence[str]) -> str:
    """Numbered JSON Schema problem list; empty string when the document conforms."""
    if not problems:
        return ""
    lines = ["JSON Schema validation failed:", ""]
    lines += [f"  {number}. {problem}" for number, problem in enumerate(problems, start=1)]
    return "\n".join(lines)
