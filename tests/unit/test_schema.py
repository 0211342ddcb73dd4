import copy
import json

import pytest

from domain.taxonomy import (
    HybridTaxonomy,
    TaxonomySchemaError,
    build_schema_from_json,
    extract_classical_hierarchy,
    extract_faceted_dimensions,
    load_schema,
)
from domain.validation import compare_with_schema, validate_against_schema

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


@pytest.fixture
def beverage_schema_document(beverage_document) -> dict:
    """Schema file matching the beverage document, with a few JSON Schema rules."""
    return {
        "$schema": DRAFT_07,
        "$id": "beverages-v1",
        "title": "Beverages",
        "description": "Drinks by kind and serving facets.",
        "type": "object",
        "required": ["classical_hierarchy", "faceted_dimensions", "example_items"],
        "properties": {
            "example_items": {
                "type": "array",
                "items": {"type": "object", "required": ["name", "classical_path", "facets"]},
            }
        },
        "classical_hierarchy": copy.deepcopy(beverage_document["classical_hierarchy"]),
        "faceted_dimensions": copy.deepcopy(beverage_document["faceted_dimensions"]),
    }


def test_extract_classical_hierarchy() -> None:
    hierarchy = extract_classical_hierarchy(
        {"classical_hierarchy": {"root": "TestRoot", "children": [{"genus": "TestRoot", "species": "Leaf"}]}}
    )
    assert hierarchy.root_label == "TestRoot"
    assert [n.species for n in hierarchy.children] == ["Leaf"]


def test_extract_faceted_dimensions() -> None:
    dimensions = extract_faceted_dimensions(
        {"faceted_dimensions": {"color": ["red", "green", "blue"], "size": ["small", "large"]}}
    )
    assert dimensions == {"color": ["red", "green", "blue"], "size": ["small", "large"]}


@pytest.mark.parametrize(
    "extract, document, message",
    [
        (extract_classical_hierarchy, {"faceted_dimensions": {}}, "missing 'classical_hierarchy'"),
        (extract_faceted_dimensions, {"classical_hierarchy": {"root": "R"}}, "missing 'faceted_dimensions'"),
        (extract_classical_hierarchy, {"classical_hierarchy": {"children": []}}, "Failed to parse classical_hierarchy"),
        (extract_faceted_dimensions, {"faceted_dimensions": {"color": "red"}}, "Failed to parse faceted_dimensions"),
    ],
)
def test_extract_errors(extract, document: dict, message: str) -> None:
    with pytest.raises(TaxonomySchemaError, match=message):
        extract(document)


def test_build_schema_from_json(beverage_schema_document) -> None:
    schema = build_schema_from_json(beverage_schema_document)

    assert schema.schema_id == "beverages-v1"
    assert schema.title == "Beverages"
    assert schema.description == "Drinks by kind and serving facets."
    assert schema.hierarchy.root_label == "Beverage"
    assert list(schema.facet_dimensions) == ["temperature", "caffeine_content"]
    assert schema.json_schema == beverage_schema_document


def test_build_schema_defaults() -> None:
    schema = build_schema_from_json({"classical_hierarchy": {"root": "R"}, "faceted_dimensions": {"c": ["x"]}})
    assert schema.schema_id == "unknown"
    assert schema.title == "Untitled Taxonomy"
    assert schema.description is None


def test_load_schema_rejects_bad_input() -> None:
    with pytest.raises(TaxonomySchemaError, match="not valid JSON"):
        load_schema(b"{oops")
    with pytest.raises(TaxonomySchemaError, match="Expected a JSON object"):
        load_schema(b"[1, 2]")


def test_load_schema_from_bytes(beverage_schema_document) -> None:
    schema = load_schema(json.dumps(beverage_schema_document).encode("utf-8"))
    assert schema.schema_id == "beverages-v1"


PERSON_SCHEMA = {
    "$schema": DRAFT_07,
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "number"},
        "color": {"type": "string", "enum": ["red", "green", "blue"]},
        "tags": {"type": "array", "items": {"type": "string"}, "minItems": 1},
    },
    "required": ["name"],
}


def test_conforming_data_passes() -> None:
    assert validate_against_schema(PERSON_SCHEMA, {"name": "Alice", "age": 30, "tags": ["a"]}) == []


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"age": 30}, "'name' is a required property at root"),
        ({"name": "A", "age": "old"}, "at /age"),
        ({"name": "A", "color": "yellow"}, "at /color"),
        ({"name": "A", "tags": []}, "at /tags"),
    ],
)
def test_violations_name_their_location(data: dict, fragment: str) -> None:
    problems = validate_against_schema(PERSON_SCHEMA, data)
    assert len(problems) == 1
    assert fragment in problems[0]


def test_every_violation_is_reported_in_location_order() -> None:
    problems = validate_against_schema(PERSON_SCHEMA, {"name": 5, "age": "old"})
    assert [p.rsplit(" at ", 1)[1] for p in problems] == ["/age", "/name"]


def test_invalid_schema_is_reported() -> None:
    problems = validate_against_schema({"$schema": DRAFT_07, "type": "nonsense"}, {})
    assert len(problems) == 1
    assert problems[0].startswith("Schema compilation error:")


def test_document_conforms_to_its_schema(beverage_document, beverage_schema_document) -> None:
    schema = build_schema_from_json(beverage_schema_document)
    taxonomy = HybridTaxonomy.model_validate(beverage_document)

    assert validate_against_schema(schema.json_schema, beverage_document) == []
    assert compare_with_schema(schema, taxonomy) == []


def test_item_missing_a_required_key_is_reported(beverage_document, beverage_schema_document) -> None:
    del beverage_document["example_items"][1]["facets"]
    problems = validate_against_schema(beverage_schema_document, beverage_document)
    assert problems == ["'facets' is a required property at /example_items/1"]


def test_compare_with_schema_reports_drift(beverage_document, beverage_schema_document) -> None:
    beverage_document["classical_hierarchy"]["root"] = "Drink"
    beverage_document["faceted_dimensions"]["temperature"] = ["hot", "warm"]
    del beverage_document["faceted_dimensions"]["caffeine_content"]
    beverage_document["faceted_dimensions"]["origin"] = ["Kenya"]

    schema = build_schema_from_json(beverage_schema_document)
    problems = compare_with_schema(schema, HybridTaxonomy.model_validate(beverage_document))

    assert problems == [
        "classical_hierarchy root 'Drink' differs from schema root 'Beverage'",
        "facet 'temperature' lacks schema values: iced",
        "facet 'temperature' has values not in schema: warm",
        "faceted_dimensions is missing schema dimension 'caffeine_content'",
        "facet 'origin' is not declared by schema 'beverages-v1'",
    ]
