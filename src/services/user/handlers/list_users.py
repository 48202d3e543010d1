from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import Role
from services.shared.utils import (
    api_response,
    bad_request_response,
    internal_error_response,
    query_parameter,
)
from services.user.applications.list_users import ListUsersService
from services.user.handlers.response_models import to_list_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = ListUsersService(repository=DynamoDBUserRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー一覧取得 Lambda Handler（?role=Admin|User で絞り込み）"""

    raw_role = query_parameter(event, "role")
    logger.info("Listing users", extra={"role": raw_role})

    try:
        role = Role(raw_role) if raw_role else None
    except ValueError:
        return bad_request_response(f"Invalid role: {raw_role}")

    try:
        users = service.list_users(role=role)
    except Exception:
        logger.exception("Failed to list users")
        return internal_error_response()

    return api_response(200, to_list_response(users))
