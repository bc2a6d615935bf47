from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from ..errors import DecodeError, NetworkError
from .config import PlaceSearchConfig
from .models import PlaceRecord, PlaceSearchResponse

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_METERS = 1000


class PlaceSearchClient:
    """Async client for the Kakao Local keyword-search endpoint."""

    def __init__(
        self,
        config: PlaceSearchConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> PlaceSearchClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/keyword.json"

    def build_params(
        self,
        keyword: str,
        category_code: str | None,
        latitude: float,
        longitude: float,
        radius: int,
        page: int | None,
        size: int | None,
    ) -> dict[str, str]:
        params = {
            "query": keyword,
            "x": str(longitude),
            "y": str(latitude),
            "radius": str(radius),
        }
        if category_code:
            params["category_group_code"] = category_code
        if page is not None:
            params["page"] = str(page)
        if size is not None:
            params["size"] = str(size)
        return params

    async def search(
        self,
        keyword: str,
        category_code: str | None = None,
        *,
        latitude: float,
        longitude: float,
        radius: int = DEFAULT_RADIUS_METERS,
        page: int | None = 1,
        size: int | None = None,
    ) -> list[PlaceRecord]:
        """
        Run one keyword search around a coordinate.

        Raises ``NetworkError`` on transport or HTTP status failures and
        ``DecodeError`` when the body is not the expected JSON document.
        """
        if size is None:
            size = self.config.page_size
        params = self.build_params(
            keyword, category_code, latitude, longitude, radius, page, size,
        )
        headers = {"Authorization": self.config.authorization}

        try:
            response = await self._http.get(self.endpoint, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"Place search failed with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Place search request failed: {exc}") from exc

        logger.debug("Place search response: %s", response.text)

        try:
            parsed = PlaceSearchResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError("Unexpected place search response body") from exc

        logger.info(
            "Place search '%s' page %s returned %d of %d places",
            keyword, page, len(parsed.documents), parsed.meta.total_count,
        )
        return parsed.documents
