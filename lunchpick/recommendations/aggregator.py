from __future__ import annotations

import logging
from typing import Protocol

from ..places.models import PlaceRecord
from .categories import category_code, classify, search_keyword
from .menu_catalog import menus_for_code
from .models import Coordinate, FoodCategory, Restaurant

logger = logging.getLogger(__name__)

# The API caps a page at 15 documents; two pages give up to 30 places.
PAGES = (1, 2)
PAGE_SIZE = 15


class PlaceSearcher(Protocol):
    async def search(
        self,
        keyword: str,
        category_code: str | None = None,
        *,
        latitude: float,
        longitude: float,
        radius: int = ...,
        page: int | None = ...,
        size: int | None = ...,
    ) -> list[PlaceRecord]: ...


def to_restaurant(place: PlaceRecord, attach_menus: bool = False) -> Restaurant:
    return Restaurant(
        name=place.place_name,
        latitude=place.latitude,
        longitude=place.longitude,
        category=classify(place.category_name),
        address=place.address_name,
        phone_number=place.phone or None,
        menu=menus_for_code(place.category_group_code) if attach_menus else (),
    )


class RestaurantAggregator:
    """Turns paged place searches into restaurant records."""

    def __init__(self, client: PlaceSearcher, attach_menus: bool = False) -> None:
        self.client = client
        self.attach_menus = attach_menus

    async def fetch(
        self,
        coordinate: Coordinate,
        radius_meters: int,
        category: FoodCategory = FoodCategory.all,
    ) -> list[Restaurant]:
        """
        Fetch pages 1 and 2 for the category keyword and merge them.

        Both pages are always requested, one after the other, and page-1
        places come first. Client errors propagate unchanged.
        """
        keyword = search_keyword(category)
        places: list[PlaceRecord] = []
        for page in PAGES:
            places.extend(
                await self.client.search(
                    keyword,
                    None,
                    latitude=coordinate.latitude,
                    longitude=coordinate.longitude,
                    radius=radius_meters,
                    page=page,
                    size=PAGE_SIZE,
                )
            )

        logger.info(
            "Fetched %d places for '%s' within %dm", len(places), keyword, radius_meters,
        )
        return [to_restaurant(place, self.attach_menus) for place in places]

    async def search(
        self,
        keyword: str,
        coordinate: Coordinate,
        category: FoodCategory = FoodCategory.all,
        radius_meters: int = 1000,
    ) -> list[Restaurant]:
        """Single-page keyword search filtered by the category's group code."""
        places = await self.client.search(
            keyword,
            category_code(category),
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            radius=radius_meters,
        )
        return [to_restaurant(place, attach_menus=True) for place in places]
