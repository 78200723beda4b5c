class GeodesyError(Exception):
    """Base exception for geocoord failures."""


class InvalidArgument(GeodesyError, ValueError):
    """Raised when an input cannot describe a point or a point sequence."""
