from .geo import GeoPoint, ILatLng
from .location import LocationReading, from_location

__all__ = [
    "GeoPoint",
    "ILatLng",
    "LocationReading",
    "from_location",
]
