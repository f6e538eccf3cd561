from .flight_status import FlightStatus

__all__ = ["FlightStatus"]
