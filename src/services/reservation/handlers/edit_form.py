from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.reservation.applications.get_edit_form import GetEditFormService
from services.reservation.domain.service import SeatAvailabilityChecker
from services.reservation.handlers.response_models import to_edit_form_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    bad_request_response,
    domain_error_response,
    internal_error_response,
    path_parameter,
)

logger = Logger()

reservation_repository = DynamoDBReservationRepository()
service = GetEditFormService(
    reservation_repository=reservation_repository,
    flight_repository=DynamoDBFlightRepository(),
    seat_checker=SeatAvailabilityChecker(reservation_repository),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更画面の表示内容取得 Lambda Handler"""

    try:
        reservation_id = path_parameter(event, "id")
        logger.info("Fetching edit form", extra={"reservation_id": reservation_id})
        form = service.get(reservation_id)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to fetch edit form")
        return internal_error_response()

    return api_response(200, to_edit_form_response(form))
