class GeoError(ValueError):
    """Base exception for geographic value failures."""


class InvalidArgument(GeoError):
    """Raised when a coordinate component is outside its permitted domain."""
