from .entity import User as User
from .factory import UserFactory as UserFactory
from .repository import UserRepository as UserRepository
from .value_object import Email as Email
from .value_object import UserId as UserId
