from .baggage import Baggage as Baggage
from .bill import Bill as Bill
from .meal import Meal as Meal
from .passenger import Passenger as Passenger
from .pnr import Pnr as Pnr
from .reservation_id import ReservationId as ReservationId
from .seat import Seat as Seat
