from .entity import Reservation as Reservation
from .enum import ReservationStatus as ReservationStatus
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .service import FarePolicy as FarePolicy
from .service import PnrGenerator as PnrGenerator
from .service import SeatAvailabilityChecker as SeatAvailabilityChecker
