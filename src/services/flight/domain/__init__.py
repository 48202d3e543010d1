from .entity import Flight as Flight
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
from .value_object import FlightNumber as FlightNumber
