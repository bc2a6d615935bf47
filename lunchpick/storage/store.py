from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os
from pydantic import TypeAdapter, ValidationError

from ..errors import PersistenceError
from ..recommendations.models import FoodCategory, Menu
from .config import DEFAULT_STORAGE_CONFIG, StorageConfig
from .models import Favorite, UserPreferences

logger = logging.getLogger(__name__)

_FAVORITES_ADAPTER = TypeAdapter(list[Favorite])


async def _read_bytes(path: Path) -> bytes | None:
    """Return the file content, or ``None`` when the file does not exist yet."""
    try:
        async with aiofiles.open(path, "rb") as fh:
            return await fh.read()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise PersistenceError(f"Could not read {path}") from exc


async def _write_atomic(path: Path, payload: bytes) -> None:
    """Write ``payload`` to a sibling temp file, then rename it over ``path``."""
    tmp_path = path.with_name(f".{path.name}.{uuid4().hex}.tmp")
    try:
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        try:
            async with aiofiles.open(tmp_path, "wb") as fh:
                await fh.write(payload)
            await aiofiles.os.replace(tmp_path, path)
        except BaseException:
            if await aiofiles.os.path.exists(tmp_path):
                await aiofiles.os.remove(tmp_path)
            raise
    except OSError as exc:
        raise PersistenceError(f"Could not write {path}") from exc


class PersistenceStore:
    """
    File-backed favorites and preferences.

    Every read goes to disk and every mutation rewrites the whole document.
    There is no locking: two writers racing on the same file can lose an
    update (last writer wins).
    """

    def __init__(self, config: StorageConfig = DEFAULT_STORAGE_CONFIG) -> None:
        self.config = config

    # ── Favorites ────────────────────────────────────────────────────────

    async def load_favorites(self) -> list[Favorite]:
        path = self.config.favorites_path
        try:
            content = await _read_bytes(path)
            if content is None:
                logger.debug("No favorites file at %s yet", path)
                return []
            return _FAVORITES_ADAPTER.validate_json(content)
        except (PersistenceError, ValidationError):
            logger.warning("Could not load favorites from %s", path, exc_info=True)
            return []

    async def favorites_by_recency(self) -> list[Favorite]:
        """Favorites, newest first."""
        favorites = await self.load_favorites()
        return sorted(favorites, key=lambda f: f.date_added, reverse=True)

    async def save_favorites(self, favorites: Iterable[Favorite]) -> None:
        path = self.config.favorites_path
        try:
            await _write_atomic(path, _FAVORITES_ADAPTER.dump_json(list(favorites), indent=2))
        except PersistenceError:
            logger.warning("Could not save favorites to %s", path, exc_info=True)

    async def add_favorite(self, favorite: Favorite) -> None:
        favorites = await self.load_favorites()
        if any(f.key == favorite.key for f in favorites):
            return
        favorites.append(favorite)
        await self.save_favorites(favorites)

    async def remove_favorite(self, favorite: Favorite) -> None:
        favorites = await self.load_favorites()
        await self.save_favorites(f for f in favorites if f.key != favorite.key)

    async def is_favorite(self, menu_name: str, restaurant_name: str) -> bool:
        favorites = await self.load_favorites()
        return any(f.key == (menu_name, restaurant_name) for f in favorites)

    # ── Preferences ──────────────────────────────────────────────────────

    async def load_preferences(self) -> UserPreferences:
        path = self.config.preferences_path
        try:
            content = await _read_bytes(path)
            if content is None:
                logger.debug("No preferences file at %s yet", path)
                return UserPreferences()
            return UserPreferences.model_validate_json(content)
        except (PersistenceError, ValidationError):
            logger.warning("Could not load preferences from %s", path, exc_info=True)
            return UserPreferences()

    async def save_preferences(self, preferences: UserPreferences) -> None:
        path = self.config.preferences_path
        try:
            await _write_atomic(path, preferences.model_dump_json(indent=2).encode("utf-8"))
        except PersistenceError:
            logger.warning("Could not save preferences to %s", path, exc_info=True)

    async def set_favorite_categories(self, categories: Iterable[FoodCategory]) -> UserPreferences:
        preferences = await self.load_preferences()
        preferences.favorite_categories = set(categories)
        await self.save_preferences(preferences)
        return preferences

    # ── History ──────────────────────────────────────────────────────────

    async def record_history(self, menu: Menu) -> None:
        preferences = await self.load_preferences()
        history = [m for m in preferences.recent_recommendations if m.name != menu.name]
        history.insert(0, menu)
        preferences.recent_recommendations = history[: preferences.max_recent_count]
        await self.save_preferences(preferences)

    async def recommendation_history(self) -> list[Menu]:
        return (await self.load_preferences()).recent_recommendations

    async def clear_history(self) -> None:
        preferences = await self.load_preferences()
        preferences.recent_recommendations = []
        await self.save_preferences(preferences)

    # ── Statistics ───────────────────────────────────────────────────────

    async def recommendation_stats(self) -> dict[FoodCategory, int]:
        history = await self.recommendation_history()
        return dict(Counter(menu.category for menu in history))

    async def most_recommended_category(self) -> FoodCategory | None:
        """Category with the highest count; ties go to the earlier enum member."""
        stats = await self.recommendation_stats()
        best: FoodCategory | None = None
        for category in FoodCategory:
            count = stats.get(category, 0)
            if count and (best is None or count > stats[best]):
                best = category
        return best
