"""
Unit test fixtures.

Documents are built in memory; tests that touch disk use tmp_path.
"""

import copy

import pytest

from domain.taxonomy import HybridTaxonomy, Item

BEVERAGE_DOCUMENT = {
    "taxonomy_description": "Beverages by kind and serving facets.",
    "classical_hierarchy": {
        "root": "Beverage",
        "children": [
            {
                "genus": "Beverage",
                "species": "Coffee",
                "differentia": "brewed from roasted beans",
                "children": [
                    {"genus": "Coffee", "species": "Espresso", "differentia": "pressure brewed"},
                    {"genus": "Coffee", "species": "Filter Coffee"},
                ],
            },
            {
                "genus": "Beverage",
                "species": "Tea",
                "differentia": "infused leaves",
                "children": [{"genus": "Tea", "species": "Green Tea", "differentia": "unoxidized"}],
            },
        ],
    },
    "faceted_dimensions": {
        "temperature": ["hot", "iced"],
        "caffeine_content": ["low", "medium", "high"],
    },
    "example_items": [
        {
            "name": "The Flat White",
            "classical_path": ["Coffee", "Espresso"],
            "facets": {"temperature": "hot", "caffeine_content": "high"},
        },
        {
            "name": "Affogato",
            "classical_path": ["Coffee", "Espresso"],
            "facets": {"temperature": "iced"},
        },
        {
            "name": "Sencha",
            "classical_path": ["Tea", "Green Tea"],
            "facets": {"temperature": ["hot", "iced"], "caffeine_content": "low"},
        },
    ],
}


@pytest.fixture
def beverage_document() -> dict:
    """Raw JSON-shaped document (a fresh deep copy per test)."""
    return copy.deepcopy(BEVERAGE_DOCUMENT)


@pytest.fixture
def beverage_taxonomy(beverage_document) -> HybridTaxonomy:
    """Validated model of the beverage document."""
    return HybridTaxonomy.model_validate(beverage_document)


@pytest.fixture
def make_item():
    """Factory for standalone items."""

    def _make(name: str, path: list[str] | None = None, **facets) -> Item:
        return Item(name=name, classical_path=list(path or []), facets=facets)

    return _make
