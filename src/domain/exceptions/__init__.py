from .geo import GeoError, InvalidArgument

__all__ = ["GeoError", "InvalidArgument"]
