from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.reservation.applications.get_booking_form import GetBookingFormService
from services.reservation.domain.service import SeatAvailabilityChecker
from services.reservation.handlers.response_models import to_booking_form_response
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

service = GetBookingFormService(
    flight_repository=DynamoDBFlightRepository(),
    seat_checker=SeatAvailabilityChecker(DynamoDBReservationRepository()),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約画面（フライト + 埋まっている座席）取得 Lambda Handler"""

    try:
        flight_number = path_parameter(event, "flightNumber")
        logger.info("Fetching booking form", extra={"flight_number": flight_number})
        form = service.get(flight_number)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking form")
        return internal_error_response()

    return api_response(200, to_booking_form_response(form))
