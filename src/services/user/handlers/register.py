from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    bad_request_response,
    domain_error_response,
    internal_error_response,
    parse_json_body,
    validation_error_response,
)
from services.user.applications.register_user import RegisterUserService
from services.user.domain.factory import UserFactory
from services.user.handlers.request_models import RegisterUserRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.argon2_password_hasher import Argon2PasswordHasher
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = RegisterUserService(
    repository=DynamoDBUserRepository(),
    factory=UserFactory(Argon2PasswordHasher()),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """利用者登録 Lambda Handler"""

    logger.info("Received register user request")

    try:
        request = RegisterUserRequest.model_validate(parse_json_body(event.body))
        user = service.register(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
        )
    except ValidationError as e:
        return validation_error_response(e, "Please fill in all fields")
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        logger.warning("Registration rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to register user")
        return internal_error_response()

    logger.info("User registered", extra={"user_id": str(user.id)})
    return api_response(201, to_response(user, "Account created successfully!"))
