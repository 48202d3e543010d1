from .reservation_repository import ReservationRepository as ReservationRepository
