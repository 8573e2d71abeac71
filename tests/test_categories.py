"""Tests for the category registry."""

import pytest

from src.core.categories import CategoryRegistry
from src.core.exceptions import UnknownCategory


EXPECTED_ORDER = [
    "Roads and Infrastructure",
    "Water and Sewage",
    "Electricity and Power",
    "Waste Management",
    "Public Safety",
    "Parks and Recreation",
    "Traffic and Transportation",
    "Environmental Issues",
    "Housing and Buildings",
    "General Complaints",
]


def test_list_categories_keeps_configured_order(registry):
    assert list(registry.list_categories()) == EXPECTED_ORDER


def test_list_categories_is_stable_across_calls(registry):
    assert registry.list_categories() == registry.list_categories()


def test_default_category_is_general_complaints(registry):
    assert registry.default_category == "General Complaints"


def test_every_category_has_keywords(registry):
    for category in registry.list_categories():
        assert len(registry.keywords_for(category)) >= 1


def test_keywords_for_returns_configured_keywords(registry):
    keywords = registry.keywords_for("Parks and Recreation")
    assert "playground" in keywords
    assert "swing" in keywords
    assert keywords[0] == "park"


def test_keywords_for_unknown_category_raises(registry):
    with pytest.raises(UnknownCategory) as exc_info:
        registry.keywords_for("Alien Invasions")
    assert exc_info.value.category == "Alien Invasions"


def test_contains_and_len(registry):
    assert "Water and Sewage" in registry
    assert "water and sewage" not in registry
    assert len(registry) == 10


def test_keywords_are_lowercased_and_deduplicated():
    registry = CategoryRegistry(
        ["A", "B"],
        {"A": ["Pothole", "pothole", "  Road  ", ""], "B": ["bin"]},
    )
    assert registry.keywords_for("A") == ("pothole", "road")


def test_default_category_falls_back_to_last_category():
    registry = CategoryRegistry(["A", "B"], {"A": ["a"], "B": ["b"]})
    assert registry.default_category == "B"


def test_registry_is_read_only():
    registry = CategoryRegistry(["A"], {"A": ["a"]})
    with pytest.raises(TypeError):
        registry._keywords["A"] = ("changed",)


@pytest.mark.parametrize(
    "categories, keywords, default",
    [
        ([], {}, None),
        (["A", "A"], {"A": ["a"]}, None),
        (["A"], {"A": []}, None),
        (["A"], {"A": ["   "]}, None),
        (["A"], {}, None),
        (["A"], {"A": ["a"], "B": ["b"]}, None),
        (["A"], {"A": ["a"]}, "Z"),
    ],
)
def test_invalid_registry_configuration_rejected(categories, keywords, default):
    with pytest.raises(ValueError):
        CategoryRegistry(categories, keywords, default)


def test_from_config_requires_triage_section():
    with pytest.raises(ValueError):
        CategoryRegistry.from_config({"classifier": {}})
