from .caller_identity import CallerIdentity as CallerIdentity
from .currency import Currency as Currency
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .role import Role as Role
