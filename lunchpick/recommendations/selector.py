from __future__ import annotations

import logging
import random

from ..storage.store import PersistenceStore
from .aggregator import RestaurantAggregator
from .models import Coordinate, FoodCategory, Menu, Restaurant

logger = logging.getLogger(__name__)


def _menus_in(restaurants: list[Restaurant], category: FoodCategory) -> list[Menu]:
    return [
        item
        for restaurant in restaurants
        for item in restaurant.menu
        if category.matches(item.category)
    ]


def _first_serving(restaurants: list[Restaurant], menu: Menu) -> Restaurant | None:
    for restaurant in restaurants:
        if restaurant.has_menu_named(menu.name):
            return restaurant
    return None


class RecommendationSelector:
    """Random menu/restaurant picks over freshly fetched nearby restaurants."""

    def __init__(
        self,
        aggregator: RestaurantAggregator,
        store: PersistenceStore,
        rng: random.Random | None = None,
        default_radius: int = 1000,
    ) -> None:
        self.aggregator = aggregator
        self.store = store
        self.rng = rng or random.Random()
        self.default_radius = default_radius

    async def _restaurants(self, coordinate: Coordinate) -> list[Restaurant]:
        return await self.aggregator.fetch(coordinate, self.default_radius)

    async def _pick(
        self,
        restaurants: list[Restaurant],
        category: FoodCategory,
        exclude_recent: bool,
    ) -> Menu | None:
        candidates = _menus_in(restaurants, category)

        available = candidates
        if exclude_recent:
            recent_names = {m.name for m in await self.store.recommendation_history()}
            available = [m for m in candidates if m.name not in recent_names]
        if not available:
            available = candidates
        if not available:
            logger.info("No %s menus among %d restaurants", category.value, len(restaurants))
            return None

        selected = self.rng.choice(available)
        await self.store.record_history(selected)
        return selected

    async def recommend(
        self,
        category: FoodCategory,
        coordinate: Coordinate,
        exclude_recent: bool = True,
    ) -> Menu | None:
        """
        Pick a random menu in ``category`` and record it in the history.

        Recently recommended names are skipped when possible; if that leaves
        nothing, the full category set is used instead. Returns ``None``
        when there is no menu at all.
        """
        restaurants = await self._restaurants(coordinate)
        return await self._pick(restaurants, category, exclude_recent)

    async def recommend_with_restaurant(
        self,
        category: FoodCategory,
        coordinate: Coordinate,
        exclude_recent: bool = True,
    ) -> tuple[Menu, Restaurant | None] | None:
        """Like ``recommend``, plus the first restaurant serving the pick from the same fetch."""
        restaurants = await self._restaurants(coordinate)
        menu = await self._pick(restaurants, category, exclude_recent)
        if menu is None:
            return None
        return menu, _first_serving(restaurants, menu)

    async def recommend_by_preference(self, coordinate: Coordinate) -> Menu | None:
        favorites = (await self.store.load_preferences()).favorite_categories
        if favorites:
            # Stable order for a seeded rng
            category = self.rng.choice(sorted(favorites, key=lambda c: c.value))
        else:
            category = FoodCategory.all
        return await self.recommend(category, coordinate)

    async def popular_menus(self, coordinate: Coordinate, limit: int = 5) -> list[Menu]:
        menus = _menus_in(await self._restaurants(coordinate), FoodCategory.all)
        self.rng.shuffle(menus)
        return menus[:limit]

    async def menus_by_category(
        self, category: FoodCategory, coordinate: Coordinate,
    ) -> list[Menu]:
        return _menus_in(await self._restaurants(coordinate), category)

    async def restaurant_for_menu(
        self, menu: Menu, coordinate: Coordinate,
    ) -> Restaurant | None:
        return _first_serving(await self._restaurants(coordinate), menu)

    async def recommend_restaurant(
        self,
        category: FoodCategory,
        coordinate: Coordinate,
        radius_meters: int | None = None,
    ) -> Restaurant | None:
        """Pick one nearby restaurant whose classified category matches."""
        restaurants = await self.aggregator.fetch(
            coordinate, radius_meters or self.default_radius, category,
        )
        matching = [r for r in restaurants if category.matches(r.category)]
        if not matching:
            return None
        return self.rng.choice(matching)
