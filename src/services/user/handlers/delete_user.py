from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    bad_request_response,
    domain_error_response,
    internal_error_response,
    path_parameter,
)
from services.user.applications.delete_user import DeleteUserService
from services.user.handlers.response_models import to_message_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = DeleteUserService(repository=DynamoDBUserRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー削除 Lambda Handler"""

    try:
        user_id = path_parameter(event, "id")
        logger.info("Deleting user", extra={"user_id": user_id})
        service.delete(user_id)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to delete user")
        return internal_error_response()

    return api_response(200, to_message_response("User deleted successfully"))
