from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import GeoPoint


class GeoPointSchema(BaseModel):
    """JSON form of a point; longitude keeps whatever range it had."""

    model_config = ConfigDict(allow_inf_nan=False)

    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float
    alt: float = 0.0

    @classmethod
    def from_domain(cls, point: GeoPoint) -> "GeoPointSchema":
        return cls(lat=point.latitude, lon=point.longitude, alt=point.altitude)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon, self.alt)
