from __future__ import annotations

from pydantic import BaseModel, Field


def parse_coordinate(text: str | None) -> float:
    """Parse a wire-format coordinate, falling back to 0.0."""
    try:
        return float(text)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


class PlaceRecord(BaseModel):
    id: str
    place_name: str
    category_name: str
    category_group_code: str
    category_group_name: str
    phone: str
    address_name: str
    road_address_name: str
    x: str = Field(..., description="Longitude as text")
    y: str = Field(..., description="Latitude as text")
    distance: str | None = None

    @property
    def longitude(self) -> float:
        return parse_coordinate(self.x)

    @property
    def latitude(self) -> float:
        return parse_coordinate(self.y)


class PlaceSearchMeta(BaseModel):
    total_count: int
    pageable_count: int
    is_end: bool


class PlaceSearchResponse(BaseModel):
    documents: list[PlaceRecord]
    meta: PlaceSearchMeta
