from __future__ import annotations

import random
from pathlib import Path

import pytest

from lunchpick.places.models import PlaceRecord
from lunchpick.recommendations.aggregator import RestaurantAggregator
from lunchpick.recommendations.models import Coordinate, FoodCategory, Menu, Restaurant
from lunchpick.recommendations.selector import RecommendationSelector
from lunchpick.storage.config import StorageConfig
from lunchpick.storage.store import PersistenceStore

SEOUL = Coordinate(latitude=37.5665, longitude=126.9780)


def make_place(
    index: int,
    category_name: str = "음식점 > 한식 > 찌개,전골",
    code: str = "FD6",
    **overrides,
) -> PlaceRecord:
    data = {
        "id": str(1000 + index),
        "place_name": f"Place {index}",
        "category_name": category_name,
        "category_group_code": code,
        "category_group_name": "음식점",
        "phone": "02-123-4567",
        "address_name": f"서울 중구 태평로1가 {index}",
        "road_address_name": f"서울 중구 세종대로 {index}",
        "x": "126.9780",
        "y": "37.5665",
        "distance": "120",
    }
    data.update(overrides)
    return PlaceRecord(**data)


class FakePlaceClient:
    """Serves canned pages and records every call.

    With ``fail_from_call`` set, ``error`` is raised only from that (1-based)
    call onwards.
    """

    def __init__(self, pages: dict[int, list[PlaceRecord]] | None = None, error: Exception | None = None,
                 fail_from_call: int = 1):
        self.pages = pages or {}
        self.error = error
        self.fail_from_call = fail_from_call
        self.calls: list[dict] = []

    async def search(self, keyword, category_code=None, *, latitude, longitude,
                     radius=1000, page=1, size=15):
        self.calls.append({
            "keyword": keyword,
            "category_code": category_code,
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "page": page,
            "size": size,
        })
        if self.error is not None and len(self.calls) >= self.fail_from_call:
            raise self.error
        return list(self.pages.get(page, []))


class FakeAggregator:
    """Returns a fixed restaurant list regardless of the query."""

    def __init__(self, restaurants: list[Restaurant], error: Exception | None = None):
        self.restaurants = restaurants
        self.error = error
        self.calls: list[tuple] = []

    async def fetch(self, coordinate, radius_meters, category=FoodCategory.all):
        self.calls.append((coordinate, radius_meters, category))
        if self.error is not None:
            raise self.error
        return list(self.restaurants)


def make_restaurant(name: str, category: FoodCategory, menu_names: list[str]) -> Restaurant:
    return Restaurant(
        name=name,
        latitude=SEOUL.latitude,
        longitude=SEOUL.longitude,
        category=category,
        address="서울 중구",
        menu=tuple(Menu(name=n, category=category) for n in menu_names),
    )


@pytest.fixture
def store(tmp_path: Path) -> PersistenceStore:
    return PersistenceStore(StorageConfig(data_dir=tmp_path))


@pytest.fixture
def sample_restaurants() -> list[Restaurant]:
    return [
        make_restaurant("Hanok", FoodCategory.korean, ["김치찌개", "된장찌개", "비빔밥"]),
        make_restaurant("Dragon", FoodCategory.chinese, ["짜장면", "짬뽕", "탕수육"]),
        make_restaurant("Sushi Bar", FoodCategory.japanese, ["초밥", "라멘", "돈카츠"]),
    ]


@pytest.fixture
def selector_factory(store):
    def _build(restaurants: list[Restaurant], seed: int = 7, error: Exception | None = None):
        aggregator = FakeAggregator(restaurants, error=error)
        return RecommendationSelector(aggregator, store, rng=random.Random(seed))

    return _build


@pytest.fixture
def fake_client_factory():
    def _build(pages=None, error=None, attach_menus=False):
        client = FakePlaceClient(pages, error)
        return client, RestaurantAggregator(client, attach_menus=attach_menus)

    return _build
