from .entity import Reservation as Reservation
from .enum import BookingStatus as BookingStatus
from .exception import FlightNotBookableException as FlightNotBookableException
from .factory import BookingDetails as BookingDetails
from .factory import PnrGenerator as PnrGenerator
from .factory import ReservationFactory as ReservationFactory
from .gateway import FlightCatalogGateway as FlightCatalogGateway
from .gateway import PassengerDirectoryGateway as PassengerDirectoryGateway
from .repository import ReservationRepository as ReservationRepository
from .value_object import FlightSnapshot as FlightSnapshot
from .value_object import Pnr as Pnr
from .value_object import ReservationId as ReservationId
from .value_object import Seat as Seat
