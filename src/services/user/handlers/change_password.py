from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.shared.domain import AuthenticationException, DomainException
from services.shared.utils import (
    api_response,
    bad_request_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
    parse_json_body,
    validation_error_response,
)
from services.user.applications.change_password import ChangePasswordService
from services.user.handlers.request_models import ChangePasswordRequest
from services.user.handlers.response_models import to_message_response
from services.user.infrastructure.argon2_password_hasher import Argon2PasswordHasher
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = ChangePasswordService(
    repository=DynamoDBUserRepository(),
    password_hasher=Argon2PasswordHasher(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """パスワード変更 Lambda Handler"""

    caller = caller_from_event(event)
    if not caller.is_authenticated:
        return domain_error_response(
            AuthenticationException("Authentication required.")
        )

    logger.info("Received change password request", extra={"user_id": caller.user_id})

    try:
        request = ChangePasswordRequest.model_validate(parse_json_body(event.body))
        service.change(
            caller=caller,
            current_password=request.current_password,
            new_password=request.new_password,
            confirm_new_password=request.confirm_new_password,
        )
    except ValidationError as e:
        return validation_error_response(e, "All password fields are required.")
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        logger.warning(
            "Password change rejected",
            extra={"user_id": caller.user_id, "reason": str(e)},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to change password")
        return internal_error_response()

    logger.info("Password changed", extra={"user_id": caller.user_id})
    return api_response(200, to_message_response("Password successfully changed."))
