from .geodesy import GeodesyError, InvalidArgument

__all__ = ["GeodesyError", "InvalidArgument"]
