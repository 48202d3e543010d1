from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.reservation.applications.list_reservations import (
    ListReservationsService,
)
from services.reservation.handlers.response_models import to_list_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
)
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = ListReservationsService(
    reservation_repository=DynamoDBReservationRepository(),
    flight_repository=DynamoDBFlightRepository(),
    user_repository=DynamoDBUserRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler（一般ユーザーは自分の予約のみ）"""

    caller = caller_from_event(event)
    logger.info(
        "Listing reservations",
        extra={"user_id": caller.user_id, "role": caller.role.value},
    )

    try:
        views = service.list_for_caller(caller)
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list reservations")
        return internal_error_response()

    return api_response(200, to_list_response(views))
