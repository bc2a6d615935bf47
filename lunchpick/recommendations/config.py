from __future__ import annotations

import os
from dataclasses import dataclass


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class RecommendationConfig:
    default_radius: int = 1000
    # The home screen searches a wider area when picking a restaurant
    restaurant_radius: int = 7000
    attach_menus: bool = True
    popular_limit: int = 5
    seed: int | None = None

    @classmethod
    def from_env(cls) -> RecommendationConfig:
        return cls(
            default_radius=int(os.getenv("LUNCHPICK_DEFAULT_RADIUS", "1000")),
            restaurant_radius=int(os.getenv("LUNCHPICK_RESTAURANT_RADIUS", "7000")),
            attach_menus=os.getenv("LUNCHPICK_ATTACH_MENUS", "true").lower() in {"1", "true", "yes"},
            seed=_optional_int("LUNCHPICK_SEED"),
        )

