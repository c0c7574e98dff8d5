from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.adapters.api.schemas.geo import GeoPointSchema
from src.domain.models import GeoPoint


def test_schema_round_trips_domain_point() -> None:
    p = GeoPoint(28.1234, 200.0, 15.0)

    payload = GeoPointSchema.from_domain(p).model_dump()

    assert payload == {"lat": 28.1234, "lon": 200.0, "alt": 15.0}
    assert GeoPointSchema.model_validate(payload).to_domain() == p


def test_altitude_defaults_to_sea_level() -> None:
    schema = GeoPointSchema.model_validate({"lat": 1.0, "lon": 2.0})
    assert schema.to_domain() == GeoPoint(1.0, 2.0)


@pytest.mark.parametrize(
    "payload",
    [
        {"lat": 90.5, "lon": 0.0},
        {"lat": float("nan"), "lon": 0.0},
        {"lat": 0.0, "lon": float("inf")},
        {"lon": 0.0},
    ],
)
def test_schema_rejects_invalid_payloads(payload: dict[str, float]) -> None:
    with pytest.raises(ValidationError):
        GeoPointSchema.model_validate(payload)
