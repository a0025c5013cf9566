import pytest

from timeflow_engine.lexicon import (
    DEFAULT_INFO,
    LEXICON,
    Category,
    category_color,
    category_emoji,
    category_weight,
    parse_category,
    resolve_category,
)


def test_every_category_except_other_has_an_entry():
    assert set(LEXICON) == set(Category) - {Category.OTHER}
    assert list(LEXICON) == [c for c in Category if c is not Category.OTHER]


def test_weights_are_bounded():
    for info in [*LEXICON.values(), DEFAULT_INFO]:
        assert 0.0 <= info.weight <= 1.0
        assert info.triggers == tuple(t.lower() for t in info.triggers)


def test_display_metadata_lookup():
    assert category_color(Category.FITNESS) == "#10B981"
    assert category_emoji("Learning & Skills") == "📚"
    assert category_weight("fitness") == 0.7


def test_unknown_categories_use_defaults():
    assert category_color("Gardening") == "#6B7280"
    assert category_emoji("") == "📝"
    assert category_weight(None) == DEFAULT_INFO.weight
    assert resolve_category("Gardening") is Category.OTHER


def test_parse_category_is_strict():
    assert parse_category(" time with family ") is Category.FAMILY
    with pytest.raises(ValueError):
        parse_category("Gardening")
