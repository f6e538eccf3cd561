from .entity import Flight as Flight
from .enum import FlightStatus as FlightStatus
from .enum import SortCriterion as SortCriterion
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
from .value_object import PriceTiers as PriceTiers
from .value_object import RouteSlot as RouteSlot
from .value_object import Schedule as Schedule
