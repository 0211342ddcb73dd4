from domain.taxonomy import as_display_string, as_list, values_of


def test_single_string_facet_is_one_element_list(make_item) -> None:
    item = make_item("Latte", temperature="hot")
    assert as_list(item, "temperature") == ["hot"]
    assert as_display_string(item, "temperature") == "hot"


def test_multi_valued_facet_keeps_declared_order(make_item) -> None:
    item = make_item("Sencha", temperature=["iced", "hot"])
    assert as_list(item, "temperature") == ["iced", "hot"]
    assert as_display_string(item, "temperature") == "iced, hot"


def test_missing_dimension_is_empty(make_item) -> None:
    item = make_item("Water")
    assert as_list(item, "temperature") == []
    assert as_display_string(item, "temperature") is None


def test_empty_list_has_no_display_string(make_item) -> None:
    item = make_item("Mystery", temperature=[])
    assert as_list(item, "temperature") == []
    assert as_display_string(item, "temperature") is None


def test_as_list_returns_a_copy(make_item) -> None:
    item = make_item("Sencha", temperature=["hot", "iced"])
    values = as_list(item, "temperature")
    values.append("warm")
    assert item.facets["temperature"] == ["hot", "iced"]


def test_values_of_handles_none() -> None:
    assert values_of(None) == []
    assert values_of("x") == ["x"]
