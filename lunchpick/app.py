from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from .config import AppConfig, setup_logging
from .errors import DecodeError, NetworkError
from .recommendations.categories import category_code
from .recommendations.models import (
    DEFAULT_COORDINATE,
    CategoryOut,
    Coordinate,
    FoodCategory,
    Menu,
    MenuRecommendationResponse,
    RecommendationRequest,
    Restaurant,
)
from .services import Services, build_services
from .storage.models import (
    Favorite,
    FavoriteCategoriesRequest,
    FavoriteRequest,
    UserPreferences,
)

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Could not reach the place search service. Please try again."
NO_RESULTS_MESSAGE = "There is nothing nearby to recommend."


def get_services(request: Request) -> Services:
    return request.app.state.services


def coordinate_query(
    lat: float = Query(default=DEFAULT_COORDINATE.latitude, ge=-90.0, le=90.0),
    lng: float = Query(default=DEFAULT_COORDINATE.longitude, ge=-180.0, le=180.0),
) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lng)


def create_app(services: Services | None = None, config: AppConfig | None = None) -> FastAPI:
    """
    Build the HTTP app.

    Pass ``services`` to reuse pre-built collaborators (tests do); otherwise
    they are built at startup, which raises ``ConfigError`` when the API key
    is missing.
    """
    config = config or AppConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.log_level)
        owned = services is None
        app.state.services = services or build_services()
        try:
            yield
        finally:
            if owned:
                await app.state.services.aclose()

    app = FastAPI(title=config.title, version="1.0.0", lifespan=lifespan)
    if services is not None:
        app.state.services = services

    @app.exception_handler(NetworkError)
    @app.exception_handler(DecodeError)
    async def search_failed(request: Request, exc: Exception) -> JSONResponse:
        logger.warning("Place search failed: %s", exc)
        return JSONResponse(status_code=502, content={"detail": SEARCH_FAILED_MESSAGE})

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/categories", response_model=list[CategoryOut])
    def categories() -> list[CategoryOut]:
        return [
            CategoryOut(value=c, label=c.label, emoji=c.emoji, code=category_code(c))
            for c in FoodCategory
        ]

    # ── Restaurant endpoints ─────────────────────────────────────────────

    @app.get("/restaurants", response_model=list[Restaurant])
    async def restaurants(
        category: FoodCategory = FoodCategory.all,
        radius: int = Query(default=1000, ge=1, le=20000),
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> list[Restaurant]:
        return await svc.aggregator.fetch(coordinate, radius, category)

    @app.get("/restaurants/random", response_model=Restaurant)
    async def random_restaurant(
        category: FoodCategory = FoodCategory.all,
        radius: int | None = Query(default=None, ge=1, le=20000),
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> Restaurant:
        radius = radius or svc.recommendation_config.restaurant_radius
        restaurant = await svc.selector.recommend_restaurant(category, coordinate, radius)
        if restaurant is None:
            raise HTTPException(status_code=404, detail=NO_RESULTS_MESSAGE)
        return restaurant

    @app.get("/places/search", response_model=list[Restaurant])
    async def search_places(
        keyword: str = Query(..., min_length=1),
        category: FoodCategory = FoodCategory.all,
        radius: int = Query(default=1000, ge=1, le=20000),
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> list[Restaurant]:
        return await svc.aggregator.search(keyword, coordinate, category, radius)

    # ── Menu recommendation endpoints ────────────────────────────────────

    @app.post("/recommendations", response_model=MenuRecommendationResponse)
    async def recommend(
        body: RecommendationRequest,
        svc: Services = Depends(get_services),
    ) -> MenuRecommendationResponse:
        picked = await svc.selector.recommend_with_restaurant(
            body.category, body.coordinate, body.exclude_recent,
        )
        if picked is None:
            raise HTTPException(status_code=404, detail=NO_RESULTS_MESSAGE)
        menu, restaurant = picked
        return MenuRecommendationResponse(menu=menu, restaurant=restaurant)

    @app.post("/recommendations/preference", response_model=MenuRecommendationResponse)
    async def recommend_by_preference(
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> MenuRecommendationResponse:
        menu = await svc.selector.recommend_by_preference(coordinate)
        if menu is None:
            raise HTTPException(status_code=404, detail=NO_RESULTS_MESSAGE)
        return MenuRecommendationResponse(menu=menu)

    @app.get("/menus", response_model=list[Menu])
    async def menus(
        category: FoodCategory = FoodCategory.all,
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> list[Menu]:
        return await svc.selector.menus_by_category(category, coordinate)

    @app.get("/menus/popular", response_model=list[Menu])
    async def popular_menus(
        limit: int | None = Query(default=None, ge=1, le=50),
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> list[Menu]:
        limit = limit or svc.recommendation_config.popular_limit
        return await svc.selector.popular_menus(coordinate, limit)

    @app.post("/menus/restaurant", response_model=Restaurant)
    async def restaurant_for_menu(
        body: Menu,
        coordinate: Coordinate = Depends(coordinate_query),
        svc: Services = Depends(get_services),
    ) -> Restaurant:
        restaurant = await svc.selector.restaurant_for_menu(body, coordinate)
        if restaurant is None:
            raise HTTPException(status_code=404, detail="No nearby restaurant serves this menu")
        return restaurant

    # ── Favorites & preferences ──────────────────────────────────────────

    @app.get("/favorites", response_model=list[Favorite])
    async def list_favorites(svc: Services = Depends(get_services)) -> list[Favorite]:
        return await svc.store.favorites_by_recency()

    @app.post("/favorites")
    async def add_favorite(body: FavoriteRequest, svc: Services = Depends(get_services)) -> dict:
        exists = await svc.store.is_favorite(body.menu_name, body.restaurant_name)
        if not exists:
            await svc.store.add_favorite(Favorite(**body.model_dump()))
        return {
            "status": "exists" if exists else "added",
            "total": len(await svc.store.load_favorites()),
        }

    @app.delete("/favorites")
    async def remove_favorite(
        menu_name: str = Query(..., min_length=1),
        restaurant_name: str = Query(..., min_length=1),
        svc: Services = Depends(get_services),
    ) -> dict:
        await svc.store.remove_favorite(Favorite(menu_name=menu_name, restaurant_name=restaurant_name))
        return {"status": "removed", "total": len(await svc.store.load_favorites())}

    @app.get("/preferences/categories")
    async def favorite_categories(svc: Services = Depends(get_services)) -> dict:
        return (await svc.store.load_preferences()).model_dump(include={"favorite_categories"})

    @app.put("/preferences/categories")
    async def set_favorite_categories(
        body: FavoriteCategoriesRequest,
        svc: Services = Depends(get_services),
    ) -> dict:
        preferences: UserPreferences = await svc.store.set_favorite_categories(body.categories)
        return preferences.model_dump(include={"favorite_categories"})

    # ── History ──────────────────────────────────────────────────────────

    @app.get("/history", response_model=list[Menu])
    async def history(svc: Services = Depends(get_services)) -> list[Menu]:
        return await svc.store.recommendation_history()

    @app.delete("/history")
    async def clear_history(svc: Services = Depends(get_services)) -> dict:
        await svc.store.clear_history()
        return {"status": "cleared"}

    @app.get("/history/stats")
    async def history_stats(svc: Services = Depends(get_services)) -> dict:
        stats = await svc.store.recommendation_stats()
        top = await svc.store.most_recommended_category()
        return {
            "counts": {category.value: count for category, count in stats.items()},
            "total": sum(stats.values()),
            "most_recommended": top.value if top else None,
        }

    return app
