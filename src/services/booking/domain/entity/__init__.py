from .reservation import Reservation

__all__ = ["Reservation"]
