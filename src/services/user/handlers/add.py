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
    caller_from_event,
    domain_error_response,
    internal_error_response,
    parse_json_body,
    validation_error_response,
)
from services.user.applications.add_user import AddUserService
from services.user.domain.factory import UserFactory
from services.user.handlers.request_models import AddUserRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.argon2_password_hasher import Argon2PasswordHasher
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = AddUserService(
    repository=DynamoDBUserRepository(),
    factory=UserFactory(Argon2PasswordHasher()),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """管理者によるユーザー追加 Lambda Handler"""

    logger.info("Received add user request")

    try:
        request = AddUserRequest.model_validate(parse_json_body(event.body))
        result = service.add(
            caller=caller_from_event(event),
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=request.password,
            role=request.role,
            profile_image=request.profile_image,
        )
    except ValidationError as e:
        return validation_error_response(e, "Missing required fields")
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        logger.warning("Add user rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to add user")
        return internal_error_response()

    logger.info("User added", extra={"user_id": str(result.user.id)})
    body = to_response(result.user, "User created successfully.")
    if result.temporary_password:
        body["temporaryPassword"] = result.temporary_password
    return api_response(201, body)
