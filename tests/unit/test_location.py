from __future__ import annotations

from dataclasses import dataclass

import pytest

from src.domain.exceptions import InvalidArgument
from src.domain.models import GeoPoint, LocationReading, from_location


@dataclass(frozen=True, slots=True)
class FakeFix:
    latitude: float
    longitude: float
    altitude: float
    accuracy_m: float = 5.0


def test_from_location_copies_all_three_components() -> None:
    p = from_location(FakeFix(latitude=52.52, longitude=13.405, altitude=34.0))
    assert p == GeoPoint(52.52, 13.405, 34.0)


def test_from_location_validates() -> None:
    with pytest.raises(InvalidArgument):
        from_location(FakeFix(latitude=120.0, longitude=0.0, altitude=0.0))


def test_readings_and_points_satisfy_the_protocol() -> None:
    assert isinstance(FakeFix(0.0, 0.0, 0.0), LocationReading)
    assert isinstance(GeoPoint(), LocationReading)
    assert from_location(GeoPoint(1.0, 2.0, 3.0)) == GeoPoint(1.0, 2.0, 3.0)
