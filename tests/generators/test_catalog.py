"""Tests for the category catalog and its validation."""
from __future__ import annotations

import pytest

from findata.errors import EmptyCatalogError, InvalidRangeError
from findata.generators.catalog import (
    CATALOG,
    Category,
    CategoryProfile,
    catalog_categories,
    category_weights,
    validate_catalog,
)


def test_catalog_covers_every_category() -> None:
    assert set(CATALOG) == set(Category)
    validate_catalog(CATALOG, require_all=True)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG[Category.SALARY] = CATALOG[Category.RENT]  # type: ignore[index]


def test_only_salary_and_freelance_are_income() -> None:
    income = {category for category, profile in CATALOG.items() if profile.is_income}

    assert income == {Category.SALARY, Category.FREELANCE}


def test_profiles_have_sane_ranges_and_pools() -> None:
    for profile in CATALOG.values():
        low, high = profile.amount_range
        assert 0 <= low <= high
        assert profile.merchants
        assert profile.descriptions


def test_empty_merchant_pool_is_rejected() -> None:
    with pytest.raises(EmptyCatalogError):
        CategoryProfile(merchants=(), amount_range=(1, 2), is_income=False, frequency=0.1)


def test_reversed_amount_range_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        CategoryProfile(merchants=("A",), amount_range=(10, 1), is_income=False, frequency=0.1)


def test_negative_amount_range_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        CategoryProfile(merchants=("A",), amount_range=(-5, 1), is_income=True, frequency=0.1)


def test_empty_catalog_is_rejected() -> None:
    with pytest.raises(EmptyCatalogError):
        validate_catalog({})


def test_partial_catalog_needs_require_all_to_fail() -> None:
    partial = {Category.RENT: CATALOG[Category.RENT]}

    validate_catalog(partial)
    with pytest.raises(EmptyCatalogError, match="missing categories"):
        validate_catalog(partial, require_all=True)


def test_catalog_keys_must_be_categories() -> None:
    with pytest.raises(EmptyCatalogError):
        validate_catalog({"rent": CATALOG[Category.RENT]})  # type: ignore[dict-item]


def test_categories_follow_declaration_order() -> None:
    shuffled = {
        Category.TRAVEL: CATALOG[Category.TRAVEL],
        Category.SALARY: CATALOG[Category.SALARY],
        Category.DINING: CATALOG[Category.DINING],
    }

    assert catalog_categories(shuffled) == [Category.SALARY, Category.DINING, Category.TRAVEL]
    assert category_weights(shuffled) == [0.02, 0.25, 0.02]


def test_frequency_weights_do_not_sum_to_one() -> None:
    # The weights are relative, so weighted selection normalises them.
    assert sum(category_weights(CATALOG)) == pytest.approx(1.03)
