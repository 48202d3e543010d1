from .baggage_surcharge_rule import BaggageSurchargeRule as BaggageSurchargeRule
from .baggage_surcharge_rule import NoBaggageSurcharge as NoBaggageSurcharge
from .baggage_surcharge_rule import (
    PerKilogramBaggageSurcharge as PerKilogramBaggageSurcharge,
)
from .fare_policy import FarePolicy as FarePolicy
from .pnr_generator import PnrGenerator as PnrGenerator
from .seat_availability import SeatAvailabilityChecker as SeatAvailabilityChecker
