from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from ..errors import ConfigError

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

API_KEY_ENV = "KAKAO_API_KEY"


@dataclass(frozen=True)
class PlaceSearchConfig:
    api_key: str = ""
    base_url: str = "https://dapi.kakao.com/v2/local/search"
    auth_scheme: str = "KakaoAK"
    page_size: int = 15

    @property
    def authorization(self) -> str:
        return f"{self.auth_scheme} {self.api_key}"


def load_place_search_config() -> PlaceSearchConfig:
    """
    Read the place-search configuration from the environment.

    Called once at startup. Raises ``ConfigError`` when the API key is
    missing so the caller decides how to stop.
    """
    api_key = os.getenv(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} is not configured")
    return PlaceSearchConfig(
        api_key=api_key,
        base_url=os.getenv("KAKAO_LOCAL_BASE_URL", PlaceSearchConfig.base_url),
    )
