from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class FoodCategory(str, Enum):
    korean = "korean"
    chinese = "chinese"
    japanese = "japanese"
    western = "western"
    fast_food = "fast_food"
    cafe = "cafe"
    dessert = "dessert"
    all = "all"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    def matches(self, other: FoodCategory) -> bool:
        """``all`` matches every category; anything else only itself."""
        return self is FoodCategory.all or self is other


_LABELS: dict[FoodCategory, str] = {
    FoodCategory.korean: "한식",
    FoodCategory.chinese: "중식",
    FoodCategory.japanese: "일식",
    FoodCategory.western: "양식",
    FoodCategory.fast_food: "패스트푸드",
    FoodCategory.cafe: "카페",
    FoodCategory.dessert: "디저트",
    FoodCategory.all: "전체",
}

_EMOJI: dict[FoodCategory, str] = {
    FoodCategory.korean: "🍚",
    FoodCategory.chinese: "🥢",
    FoodCategory.japanese: "🍣",
    FoodCategory.western: "🍝",
    FoodCategory.fast_food: "🍔",
    FoodCategory.cafe: "☕️",
    FoodCategory.dessert: "🍰",
    FoodCategory.all: "🍽️",
}


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


# Seoul City Hall, used when the caller has no location fix
DEFAULT_COORDINATE = Coordinate(latitude=37.5665, longitude=126.9780)


class Menu(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    category: FoodCategory
    description: str = ""
    image_url: str | None = None


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    latitude: float
    longitude: float
    category: FoodCategory
    address: str
    phone_number: str | None = None
    menu: tuple[Menu, ...] = ()

    def has_menu_named(self, name: str) -> bool:
        return any(item.name == name for item in self.menu)


# ── API schemas ──────────────────────────────────────────────────────────


class CategoryOut(BaseModel):
    value: FoodCategory
    label: str
    emoji: str
    code: str | None


class RecommendationRequest(BaseModel):
    category: FoodCategory = FoodCategory.all
    latitude: float = Field(default=DEFAULT_COORDINATE.latitude, ge=-90.0, le=90.0)
    longitude: float = Field(default=DEFAULT_COORDINATE.longitude, ge=-180.0, le=180.0)
    exclude_recent: bool = True

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class MenuRecommendationResponse(BaseModel):
    menu: Menu
    restaurant: Restaurant | None = None
