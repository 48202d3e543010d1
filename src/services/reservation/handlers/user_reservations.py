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
from services.reservation.handlers.response_models import (
    to_user_reservations_response,
)
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    bad_request_response,
    caller_from_event,
    domain_error_response,
    internal_error_response,
    path_parameter,
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
    """管理者向け: 指定ユーザーの予約一覧 Lambda Handler"""

    try:
        user_id = path_parameter(event, "userId")
        logger.info("Listing reservations of user", extra={"user_id": user_id})
        result = service.list_for_user(caller_from_event(event), user_id)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list reservations of user")
        return internal_error_response()

    return api_response(200, to_user_reservations_response(result))
