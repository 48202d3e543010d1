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
    path_parameter,
    validation_error_response,
)
from services.user.applications.update_user import UpdateUserService
from services.user.handlers.request_models import UpdateUserRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = UpdateUserService(repository=DynamoDBUserRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー更新 Lambda Handler"""

    try:
        user_id = path_parameter(event, "id")
        logger.info("Received update user request", extra={"user_id": user_id})
        request = UpdateUserRequest.model_validate(parse_json_body(event.body))
        user = service.update(
            user_id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            role=request.role,
            profile_image=request.profile_image,
        )
    except ValidationError as e:
        return validation_error_response(e, "Missing required fields")
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to update user")
        return internal_error_response()

    return api_response(200, to_response(user, "User updated successfully"))
