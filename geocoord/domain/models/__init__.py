from .geo import GeoPoint

__all__ = ["GeoPoint"]
