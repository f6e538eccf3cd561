from .exceptions import FlightNotBookableException

__all__ = ["FlightNotBookableException"]
