"""Structural and referential checks over a taxonomy document.

Every check returns a list of problems and never raises; validate() runs
them all so a caller can show every problem in one pass.
"""

from collections.abc import Sequence

from domain.query.grouping import UNGROUPED
from domain.taxonomy.facets import values_of
from domain.taxonomy.models import ClassicalHierarchy, HierarchyNode, HybridTaxonomy, Item
from domain.validation.errors import ValidationCode, ValidationError

HIERARCHY_LOCATION = "classical_hierarchy"
DIMENSIONS_LOCATION = "faceted_dimensions"
PATH_SEPARATOR = " > "


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _item_ref(index: int, item: Item) -> str:
    return f"Item #{index + 1} ('{item.name}')"


def _item_error(code: ValidationCode, index: int, item: Item, message: str, **extra) -> ValidationError:
    return ValidationError(
        code=code,
        location=_item_ref(index, item),
        message=message,
        item_index=index,
        item_name=item.name,
        **extra,
    )


def _node_label(node: HierarchyNode, position: int) -> str:
    return node.species if not _is_blank(node.species) else f"<node {position + 1}>"


# ----- Hierarchy -----


def _check_nodes(nodes: Sequence[HierarchyNode], trail: list[str], errors: list[ValidationError]) -> None:
    seen: set[tuple[str, str]] = set()

    for position, node in enumerate(nodes):
        node_trail = trail + [_node_label(node, position)]
        location = PATH_SEPARATOR.join([HIERARCHY_LOCATION, *node_trail])

        if _is_blank(node.genus):
            errors.append(
                ValidationError(
                    code=ValidationCode.BLANK_GENUS,
                    location=location,
                    message="hierarchy node genus cannot be empty",
                    path=node_trail,
                )
            )
        if _is_blank(node.species):
            errors.append(
                ValidationError(
                    code=ValidationCode.BLANK_SPECIES,
                    location=location,
                    message="hierarchy node species cannot be empty",
                    path=node_trail,
                )
            )

        pair = (node.genus, node.species)
        if pair in seen:
            errors.append(
                ValidationError(
                    code=ValidationCode.DUPLICATE_SIBLING,
                    location=location,
                    message=f"duplicate sibling (genus '{node.genus}', species '{node.species}')",
                    path=node_trail,
                )
            )
        seen.add(pair)

        _check_nodes(node.children, node_trail, errors)


def check_hierarchy(hierarchy: ClassicalHierarchy) -> list[ValidationError]:
    """Non-blank labels everywhere and no duplicate (genus, species) among siblings."""
    errors: list[ValidationError] = []
    if _is_blank(hierarchy.root_label):
        errors.append(
            ValidationError(
                code=ValidationCode.BLANK_ROOT,
                location=HIERARCHY_LOCATION,
                message="classical hierarchy root cannot be empty",
            )
        )
    _check_nodes(hierarchy.children, [], errors)
    return errors


def resolve_path(hierarchy: ClassicalHierarchy, path: Sequence[str]) -> int | None:
    """
    Walk ``path`` down the tree; return the index of the first segment that
    cannot be matched, or None when the whole path resolves.

    A leading segment equal to the root label is accepted. A segment equal to
    a node's species descends into that node; a segment equal to the genus of
    nodes at the current level names that level and does not descend. Each
    level can be named once; the root label counts as naming the top level.
    """
    level: Sequence[HierarchyNode] = hierarchy.children
    level_named = False

    for index, segment in enumerate(path):
        if index == 0 and segment == hierarchy.root_label:
            level_named = True
            continue

        node = next((n for n in level if n.species == segment), None)
        if node is not None:
            level = node.children
            level_named = False
            continue

        if not level_named and any(n.genus == segment for n in level):
            level_named = True
            continue

        return index

    return None


def check_item_paths(taxonomy: HybridTaxonomy) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for index, item in enumerate(taxonomy.items):
        if not item.classical_path:
            continue
        failed_at = resolve_path(taxonomy.hierarchy, item.classical_path)
        if failed_at is None:
            continue
        segment = item.classical_path[failed_at]
        if failed_at == 0:
            detail = f"'{segment}' is not a top-level node of '{taxonomy.hierarchy.root_label}'"
        else:
            detail = f"'{segment}' is not a valid child of '{item.classical_path[failed_at - 1]}'"
        errors.append(
            _item_error(
                ValidationCode.UNRESOLVED_PATH,
                index,
                item,
                f"invalid classical_path - {detail}",
                path=list(item.classical_path),
            )
        )
    return errors


# ----- Facet dimensions -----


def check_dimensions(facet_dimensions: dict[str, list[str]]) -> list[ValidationError]:
    """Declared dimensions: non-blank names and values, no duplicates, no reserved keys."""
    errors: list[ValidationError] = []

    for dimension, allowed in facet_dimensions.items():
        location = f"{DIMENSIONS_LOCATION}.{dimension}"
        if _is_blank(dimension):
            errors.append(
                ValidationError(
                    code=ValidationCode.BLANK_DIMENSION,
                    location=DIMENSIONS_LOCATION,
                    message="facet names cannot be empty",
                    dimension=dimension,
                )
            )

        seen: set[str] = set()
        for value in allowed:
            if _is_blank(value):
                errors.append(
                    ValidationError(
                        code=ValidationCode.BLANK_ALLOWED_VALUE,
                        location=location,
                        message=f"facet '{dimension}' contains empty value",
                        dimension=dimension,
                    )
                )
            elif value == UNGROUPED:
                errors.append(
                    ValidationError(
                        code=ValidationCode.RESERVED_ALLOWED_VALUE,
                        location=location,
                        message=f"facet '{dimension}' uses reserved value '{UNGROUPED}'",
                        dimension=dimension,
                    )
                )
            if value in seen:
                errors.append(
                    ValidationError(
                        code=ValidationCode.DUPLICATE_ALLOWED_VALUE,
                        location=location,
                        message=f"facet '{dimension}' has duplicate value: '{value}'",
                        dimension=dimension,
                    )
                )
            seen.add(value)

    return errors


# ----- Items -----


def check_item_names(items: Sequence[Item]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    seen: set[str] = set()
    for index, item in enumerate(items):
        if _is_blank(item.name):
            errors.append(_item_error(ValidationCode.BLANK_ITEM_NAME, index, item, "name cannot be empty"))
            continue
        if item.name in seen:
            errors.append(_item_error(ValidationCode.DUPLICATE_ITEM_NAME, index, item, "duplicate item name"))
        seen.add(item.name)
    return errors


def check_item_facet_keys(taxonomy: HybridTaxonomy) -> list[ValidationError]:
    """Every facet key on an item must be a declared dimension; lists must not be empty."""
    errors: list[ValidationError] = []
    for index, item in enumerate(taxonomy.items):
        for dimension, raw in item.facets.items():
            if dimension not in taxonomy.facet_dimensions:
                errors.append(
                    _item_error(
                        ValidationCode.UNDECLARED_DIMENSION,
                        index,
                        item,
                        f"uses undefined facet '{dimension}'",
                        dimension=dimension,
                    )
                )
            elif not values_of(raw):
                errors.append(
                    _item_error(
                        ValidationCode.EMPTY_FACET,
                        index,
                        item,
                        f"facet '{dimension}' has empty array",
                        dimension=dimension,
                    )
                )
    return errors


def check_facet_vocabulary(taxonomy: HybridTaxonomy) -> list[ValidationError]:
    """
    Closed-vocabulary check: each facet value must be one of the dimension's
    declared values. Undeclared dimensions are reported by check_item_facet_keys.
    """
    errors: list[ValidationError] = []
    for index, item in enumerate(taxonomy.items):
        for dimension, raw in item.facets.items():
            allowed = taxonomy.facet_dimensions.get(dimension)
            if allowed is None:
                continue
            allowed_set = set(allowed)
            for value in values_of(raw):
                if value not in allowed_set:
                    errors.append(
                        _item_error(
                            ValidationCode.UNDECLARED_VALUE,
                            index,
                            item,
                            f"facet '{dimension}' has invalid value '{value}' (not in allowed values)",
                            dimension=dimension,
                        )
                    )
    return errors


def validate(taxonomy: HybridTaxonomy, *, enforce_facet_vocabulary: bool = True) -> list[ValidationError]:
    """
    Collect every structural and referential problem in a taxonomy.

    Args:
        taxonomy: Loaded document (not mutated)
        enforce_facet_vocabulary: If False, facet values outside the declared
            vocabulary are accepted; all other checks still run

    Returns:
        Problems in check order (hierarchy, dimensions, item names, paths,
        facet keys, vocabulary); an empty list means the document passes
    """
    errors: list[ValidationError] = []
    errors.extend(check_hierarchy(taxonomy.hierarchy))
    errors.extend(check_dimensions(taxonomy.facet_dimensions))
    errors.extend(check_item_names(taxonomy.items))
    errors.extend(check_item_paths(taxonomy))
    errors.extend(check_item_facet_keys(taxonomy))
    if enforce_facet_vocabulary:
        errors.extend(check_facet_vocabulary(taxonomy))
    return errors
