from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod

from src.domain.algorithms.geo_utils import (
    MAX_LATITUDE,
    great_circle_distance_m,
    wrap_longitude,
)
from src.domain.exceptions import InvalidArgument


def _bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _fold(value: float) -> int:
    bits = _bits(value)
    return (bits ^ (bits >> 32)) & 0xFFFFFFFF


def _same(a: float, b: float) -> bool:
    # Bit comparison separates +0.0 from -0.0; NaN is never equal.
    return not math.isnan(a) and _bits(a) == _bits(b)


class ILatLng(ABC):
    """Read-only view of a WGS84 position."""

    __slots__ = ()

    @property
    @abstractmethod
    def latitude(self) -> float: ...

    @property
    @abstractmethod
    def longitude(self) -> float: ...

    @property
    @abstractmethod
    def altitude(self) -> float: ...


class GeoPoint(ILatLng):
    """A WGS84 latitude/longitude pair with optional altitude.

    Latitude and longitude are decimal degrees, altitude is meters above sea
    level. Latitude must lie in [-90, 90]; longitude must be finite but is not
    range-restricted until :meth:`wrap` is called.

    Instances are mutable through the setters and :meth:`wrap`, and those are
    not synchronized. Share a point across threads only if nobody mutates it,
    or use the ``with_*`` methods, which return new points.
    """

    __slots__ = ("_latitude", "_longitude", "_altitude")

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        altitude: float = 0.0,
    ) -> None:
        if latitude is None and longitude is None:
            self._latitude = 0.0
            self._longitude = 0.0
            self._altitude = float(altitude)
            return
        if latitude is None or longitude is None:
            raise TypeError("latitude and longitude must be given together")

        lat = self._checked_latitude(latitude)
        lon = self._checked_longitude(longitude)
        self._latitude = lat
        self._longitude = lon
        self._altitude = float(altitude)

    @classmethod
    def copy_of(cls, other: GeoPoint) -> GeoPoint:
        point = cls.__new__(cls)
        point._latitude = other._latitude
        point._longitude = other._longitude
        point._altitude = other._altitude
        return point

    def copy(self) -> GeoPoint:
        return self.copy_of(self)

    __copy__ = copy

    @staticmethod
    def _checked_latitude(value: float) -> float:
        value = float(value)
        if math.isnan(value):
            raise InvalidArgument("latitude must not be NaN")
        if abs(value) > MAX_LATITUDE:
            raise InvalidArgument("latitude must be between -90 and 90")
        return value

    @staticmethod
    def _checked_longitude(value: float) -> float:
        value = float(value)
        if math.isnan(value):
            raise InvalidArgument("longitude must not be NaN")
        if math.isinf(value):
            raise InvalidArgument("longitude must not be infinite")
        return value

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float) -> None:
        self._latitude = self._checked_latitude(value)

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float) -> None:
        self._longitude = self._checked_longitude(value)

    @property
    def altitude(self) -> float:
        return self._altitude

    @altitude.setter
    def altitude(self, value: float) -> None:
        self._altitude = float(value)

    def set_latitude(self, value: float) -> None:
        self.latitude = value

    def set_longitude(self, value: float) -> None:
        self.longitude = value

    def set_altitude(self, value: float) -> None:
        self.altitude = value

    def with_latitude(self, value: float) -> GeoPoint:
        point = self.copy()
        point.latitude = value
        return point

    def with_longitude(self, value: float) -> GeoPoint:
        point = self.copy()
        point.longitude = value
        return point

    def with_altitude(self, value: float) -> GeoPoint:
        point = self.copy()
        point.altitude = value
        return point

    def wrap(self) -> GeoPoint:
        """Normalize longitude into [-180, 180) in place and return self."""

        self._longitude = wrap_longitude(self._longitude)
        return self

    def distance_to(self, other: ILatLng) -> float:
        """Great-circle distance to ``other`` in meters, ignoring altitude."""

        return great_circle_distance_m(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return (
            _same(self._latitude, other._latitude)
            and _same(self._longitude, other._longitude)
            and _same(self._altitude, other._altitude)
        )

    def __hash__(self) -> int:
        result = _fold(self._latitude)
        result = (31 * result + _fold(self._longitude)) & 0xFFFFFFFF
        result = (31 * result + _fold(self._altitude)) & 0xFFFFFFFF
        return result

    def __str__(self) -> str:
        return (
            f"GeoPoint [latitude={self._latitude}, longitude={self._longitude}, "
            f"altitude={self._altitude}]"
        )

    def __repr__(self) -> str:
        return (
            f"GeoPoint(latitude={self._latitude!r}, longitude={self._longitude!r}, "
            f"altitude={self._altitude!r})"
        )
