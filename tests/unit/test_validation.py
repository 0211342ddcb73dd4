from domain.query import apply, group_by, sort
from domain.taxonomy import Filters, HierarchyNode, Item
from domain.validation import ValidationCode, resolve_path, validate


def _codes(errors) -> list[ValidationCode]:
    return [e.code for e in errors]


def test_valid_document_has_no_errors(beverage_taxonomy) -> None:
    assert validate(beverage_taxonomy) == []


def test_blank_genus_and_species_are_reported(beverage_taxonomy) -> None:
    beverage_taxonomy.hierarchy.children.append(HierarchyNode(genus="  ", species=""))
    errors = validate(beverage_taxonomy)

    assert _codes(errors) == [ValidationCode.BLANK_GENUS, ValidationCode.BLANK_SPECIES]
    assert errors[0].location == "classical_hierarchy > <node 3>"


def test_duplicate_siblings_are_reported_at_any_depth(beverage_taxonomy) -> None:
    coffee = beverage_taxonomy.hierarchy.children[0]
    coffee.children.append(HierarchyNode(genus="Coffee", species="Espresso"))

    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.DUPLICATE_SIBLING]
    assert errors[0].path == ["Coffee", "Espresso"]
    assert "Coffee > Espresso" in errors[0].location


def test_same_pair_under_different_parents_is_fine(beverage_taxonomy) -> None:
    tea = beverage_taxonomy.hierarchy.children[1]
    tea.children.append(HierarchyNode(genus="Coffee", species="Espresso"))
    assert ValidationCode.DUPLICATE_SIBLING not in _codes(validate(beverage_taxonomy))


def test_blank_item_name(beverage_taxonomy) -> None:
    beverage_taxonomy.items.append(Item(name=" ", classical_path=[], facets={}))
    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.BLANK_ITEM_NAME]
    assert errors[0].item_index == 3


def test_duplicate_item_name(beverage_taxonomy) -> None:
    beverage_taxonomy.items.append(Item(name="Sencha", classical_path=["Tea"], facets={}))
    assert _codes(validate(beverage_taxonomy)) == [ValidationCode.DUPLICATE_ITEM_NAME]


def test_unresolved_path_references_the_item_and_queries_still_work(beverage_taxonomy) -> None:
    beverage_taxonomy.items.append(
        Item(name="Mate", classical_path=["Tea", "Yerba"], facets={"temperature": "hot"})
    )

    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.UNRESOLVED_PATH]
    assert errors[0].item_name == "Mate"
    assert "Mate" in str(errors[0])
    assert "'Yerba' is not a valid child of 'Tea'" in errors[0].message

    items = beverage_taxonomy.items
    assert len(apply(items, Filters())) == 4
    assert [i.name for i in sort(items)][0] == "Affogato"
    assert "Mate" in [i.name for i in group_by(items, "temperature")["hot"]]


def test_empty_path_is_not_checked(beverage_taxonomy) -> None:
    beverage_taxonomy.items.append(Item(name="Loose", classical_path=[], facets={}))
    assert validate(beverage_taxonomy) == []


def test_resolve_path_variants(beverage_taxonomy) -> None:
    hierarchy = beverage_taxonomy.hierarchy
    assert resolve_path(hierarchy, ["Coffee", "Espresso"]) is None
    assert resolve_path(hierarchy, ["Beverage", "Coffee", "Espresso"]) is None
    assert resolve_path(hierarchy, ["Tea", "Green Tea"]) is None
    # genus labels name a level without descending
    assert resolve_path(hierarchy, ["Coffee", "Coffee", "Espresso"]) is None
    assert resolve_path(hierarchy, ["Espresso"]) == 0
    assert resolve_path(hierarchy, ["Coffee", "Green Tea"]) == 1
    assert resolve_path(hierarchy, ["Coffee", "Espresso", "Ristretto"]) == 2


def test_undeclared_dimension(beverage_taxonomy) -> None:
    beverage_taxonomy.items[0].facets["origin"] = "Italy"
    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.UNDECLARED_DIMENSION]
    assert errors[0].dimension == "origin"


def test_undeclared_value_single_and_multi(beverage_taxonomy) -> None:
    beverage_taxonomy.items[0].facets["temperature"] = "warm"
    beverage_taxonomy.items[2].facets["temperature"] = ["hot", "tepid"]

    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.UNDECLARED_VALUE, ValidationCode.UNDECLARED_VALUE]
    assert "'warm'" in errors[0].message
    assert errors[1].item_name == "Sencha"
    assert "'tepid'" in errors[1].message


def test_vocabulary_check_can_be_relaxed(beverage_taxonomy) -> None:
    beverage_taxonomy.items[0].facets["temperature"] = "warm"
    beverage_taxonomy.items[1].facets["origin"] = "Italy"

    errors = validate(beverage_taxonomy, enforce_facet_vocabulary=False)
    assert _codes(errors) == [ValidationCode.UNDECLARED_DIMENSION]


def test_empty_facet_list(beverage_taxonomy) -> None:
    beverage_taxonomy.items[1].facets["caffeine_content"] = []
    assert _codes(validate(beverage_taxonomy)) == [ValidationCode.EMPTY_FACET]


def test_dimension_declaration_problems(beverage_taxonomy) -> None:
    beverage_taxonomy.facet_dimensions["size"] = ["small", "small", " ", "_unspecified_"]
    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [
        ValidationCode.DUPLICATE_ALLOWED_VALUE,
        ValidationCode.BLANK_ALLOWED_VALUE,
        ValidationCode.RESERVED_ALLOWED_VALUE,
    ]
    assert all(e.dimension == "size" for e in errors)


def test_blank_root_label(beverage_taxonomy) -> None:
    beverage_taxonomy.hierarchy.root_label = ""
    assert _codes(validate(beverage_taxonomy)) == [ValidationCode.BLANK_ROOT]


def test_all_problems_are_collected_in_one_pass(beverage_taxonomy) -> None:
    beverage_taxonomy.hierarchy.children.append(HierarchyNode(genus="", species="Juice"))
    beverage_taxonomy.items.append(Item(name="", classical_path=["Soda"], facets={"fizz": "yes"}))

    assert _codes(validate(beverage_taxonomy)) == [
        ValidationCode.BLANK_GENUS,
        ValidationCode.BLANK_ITEM_NAME,
        ValidationCode.UNRESOLVED_PATH,
        ValidationCode.UNDECLARED_DIMENSION,
    ]


def test_genus_label_names_a_level_only_once(beverage_taxonomy) -> None:
    hierarchy = beverage_taxonomy.hierarchy
    assert resolve_path(hierarchy, ["Tea", "Tea", "Green Tea"]) is None
    assert resolve_path(hierarchy, ["Tea", "Tea", "Tea", "Tea"]) == 2
    assert resolve_path(hierarchy, ["Beverage", "Beverage", "Coffee"]) == 1
    assert resolve_path(hierarchy, ["Beverage", "Coffee", "Coffee", "Coffee"]) == 3


def test_root_prefixed_path_then_genus_label_resolves(beverage_taxonomy) -> None:
    assert resolve_path(beverage_taxonomy.hierarchy, ["Beverage", "Coffee", "Coffee", "Espresso"]) is None


def test_repeated_genus_paths_are_reported(beverage_taxonomy) -> None:
    beverage_taxonomy.items.append(Item(name="Odd", classical_path=["Tea", "Tea", "Tea"], facets={}))
    beverage_taxonomy.items.append(Item(name="Odder", classical_path=["Beverage", "Beverage"], facets={}))

    errors = validate(beverage_taxonomy)
    assert _codes(errors) == [ValidationCode.UNRESOLVED_PATH, ValidationCode.UNRESOLVED_PATH]
    assert [e.item_name for e in errors] == ["Odd", "Odder"]
