from __future__ import annotations

from typing import Protocol, runtime_checkable

from .geo import GeoPoint


@runtime_checkable
class LocationReading(Protocol):
    """A platform location fix (GPS, network, fused provider...)."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...

    @property
    def altitude(self) -> float: ...


def from_location(reading: LocationReading) -> GeoPoint:
    """Build a validated :class:`GeoPoint` from a platform location fix."""

    return GeoPoint(reading.latitude, reading.longitude, reading.altitude)
