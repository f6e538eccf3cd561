from .pnr_generator import PnrGenerator
from .reservation_factory import BookingDetails, ReservationFactory

__all__ = ["BookingDetails", "PnrGenerator", "ReservationFactory"]
