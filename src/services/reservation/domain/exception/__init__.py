from .exceptions import (
    FlightAlreadyDepartedException as FlightAlreadyDepartedException,
)
from .exceptions import (
    SeatAlreadyBookedException as SeatAlreadyBookedException,
)
from .exceptions import (
    PnrCollisionException as PnrCollisionException,
)
