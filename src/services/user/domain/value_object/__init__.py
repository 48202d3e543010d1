from .email import Email as Email
from .user_id import UserId as UserId
