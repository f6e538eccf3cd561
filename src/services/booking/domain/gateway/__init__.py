from .flight_catalog_gateway import FlightCatalogGateway
from .passenger_directory_gateway import PassengerDirectoryGateway

__all__ = ["FlightCatalogGateway", "PassengerDirectoryGateway"]
