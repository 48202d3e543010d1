from .password_hasher import PasswordHasher as PasswordHasher
from .password_policy import ensure_new_password as ensure_new_password
from .password_policy import generate_temporary_password as generate_temporary_password
