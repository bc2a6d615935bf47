import pytest
from pydantic import ValidationError

from lunchpick.recommendations.models import Coordinate, FoodCategory, Menu, Restaurant
from lunchpick.storage.models import Favorite, UserPreferences


def test_restaurant_is_immutable():
    restaurant = Restaurant(name="A", latitude=37.5, longitude=127.0, category=FoodCategory.korean, address="Seoul")

    with pytest.raises(ValidationError):
        restaurant.name = "B"


def test_menu_ids_are_generated():
    first = Menu(name="비빔밥", category=FoodCategory.korean)
    second = Menu(name="비빔밥", category=FoodCategory.korean)

    assert first.id != second.id


def test_coordinate_bounds():
    with pytest.raises(ValidationError):
        Coordinate(latitude=91.0, longitude=0.0)


def test_favorite_defaults():
    favorite = Favorite(menu_name="짬뽕", restaurant_name="Dragon")

    assert favorite.category == FoodCategory.all
    assert favorite.date_added.tzinfo is not None
    assert favorite.key == ("짬뽕", "Dragon")


def test_preferences_reject_zero_bound():
    with pytest.raises(ValidationError):
        UserPreferences(max_recent_count=0)
