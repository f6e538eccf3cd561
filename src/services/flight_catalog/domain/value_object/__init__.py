from .flight_id import FlightId
from .price_tiers import PriceTiers
from .route_slot import RouteSlot
from .schedule import Schedule

__all__ = ["FlightId", "PriceTiers", "RouteSlot", "Schedule"]
