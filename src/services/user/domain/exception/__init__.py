from .exceptions import EmailAlreadyExistsException as EmailAlreadyExistsException
