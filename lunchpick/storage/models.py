from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..recommendations.models import FoodCategory, Menu

DEFAULT_MAX_RECENT_COUNT = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Favorite(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    menu_name: str = Field(..., min_length=1)
    restaurant_name: str = Field(..., min_length=1)
    category: FoodCategory = FoodCategory.all
    date_added: datetime = Field(default_factory=_utcnow)

    @property
    def key(self) -> tuple[str, str]:
        return (self.menu_name, self.restaurant_name)


class UserPreferences(BaseModel):
    favorite_categories: set[FoodCategory] = Field(default_factory=set)
    recent_recommendations: list[Menu] = Field(default_factory=list)
    max_recent_count: int = Field(default=DEFAULT_MAX_RECENT_COUNT, ge=1)

    @field_serializer("favorite_categories")
    def _sorted_categories(self, value: set[FoodCategory]) -> list[str]:
        return sorted(category.value for category in value)


class FavoriteRequest(BaseModel):
    menu_name: str = Field(..., min_length=1)
    restaurant_name: str = Field(..., min_length=1)
    category: FoodCategory = FoodCategory.all


class FavoriteCategoriesRequest(BaseModel):
    categories: list[FoodCategory] = Field(default_factory=list)
