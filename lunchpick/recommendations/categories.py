"""
Category tables shared by the aggregator and the selector.

The place-search API describes a place with a free-text ``category_name``
(for example ``"음식점 > 한식 > 찌개,전골"``) and a coarse
``category_group_code``. These helpers translate between those and
``FoodCategory``.
"""
from __future__ import annotations

from .models import FoodCategory

CLASSIFIER_TABLE_VERSION = 1

# First match wins, so order matters.
CLASSIFIER_PRIORITY: tuple[tuple[FoodCategory, str], ...] = (
    (FoodCategory.korean, FoodCategory.korean.label),
    (FoodCategory.chinese, FoodCategory.chinese.label),
    (FoodCategory.japanese, FoodCategory.japanese.label),
    (FoodCategory.western, FoodCategory.western.label),
    (FoodCategory.fast_food, FoodCategory.fast_food.label),
    (FoodCategory.cafe, FoodCategory.cafe.label),
    (FoodCategory.dessert, FoodCategory.dessert.label),
)

CATEGORY_CODES: dict[FoodCategory, str] = {
    FoodCategory.korean: "FD6",
    FoodCategory.chinese: "FD7",
    FoodCategory.japanese: "FD8",
    FoodCategory.western: "FD9",
    FoodCategory.fast_food: "FD4",
    FoodCategory.cafe: "CE7",
    # No dedicated dessert code exists upstream; this reuses the Korean one
    # until product confirms the intended mapping.
    FoodCategory.dessert: "FD6",
}

GENERIC_KEYWORD = "음식점"

_KEYWORD_CATEGORIES = frozenset({
    FoodCategory.korean,
    FoodCategory.chinese,
    FoodCategory.japanese,
    FoodCategory.western,
    FoodCategory.fast_food,
    FoodCategory.cafe,
})


def category_code(category: FoodCategory) -> str | None:
    """Return the API category group code, or ``None`` for no filter."""
    return CATEGORY_CODES.get(category)


def category_for_code(code: str | None) -> FoodCategory:
    for category, _ in CLASSIFIER_PRIORITY:
        if CATEGORY_CODES.get(category) == code:
            return category
    return FoodCategory.all


def classify(category_name: str | None) -> FoodCategory:
    if not category_name:
        return FoodCategory.all
    for category, label in CLASSIFIER_PRIORITY:
        if label in category_name:
            return category
    return FoodCategory.all


def search_keyword(category: FoodCategory) -> str:
    if category in _KEYWORD_CATEGORIES:
        return category.label
    return GENERIC_KEYWORD
