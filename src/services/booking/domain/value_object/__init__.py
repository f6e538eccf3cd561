from .flight_snapshot import FlightSnapshot
from .pnr import Pnr
from .reservation_id import ReservationId
from .seat import Seat

__all__ = ["FlightSnapshot", "Pnr", "ReservationId", "Seat"]
