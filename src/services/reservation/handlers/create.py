from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.reservation.applications.create_reservation import (
    CreateReservationService,
)
from services.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from services.reservation.domain.service import (
    FarePolicy,
    PnrGenerator,
    SeatAvailabilityChecker,
)
from services.reservation.handlers.request_models import CreateReservationRequest
from services.reservation.handlers.response_models import to_response
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
    parse_json_body,
    validation_error_response,
)

logger = Logger()

flight_repository = DynamoDBFlightRepository()
reservation_repository = DynamoDBReservationRepository()
fare_policy = FarePolicy.from_env()
service = CreateReservationService(
    flight_repository=flight_repository,
    reservation_repository=reservation_repository,
    factory=ReservationFactory(fare_policy),
    seat_checker=SeatAvailabilityChecker(reservation_repository),
    pnr_generator=PnrGenerator(reservation_repository),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""

    logger.info("Received create reservation request")

    try:
        request = CreateReservationRequest.model_validate(parse_json_body(event.body))
        reservation = service.create(
            flight_id=request.flight_id,
            details=_to_reservation_details(request),
            caller=caller_from_event(event),
        )
    except ValidationError as e:
        return validation_error_response(e)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        logger.warning("Reservation rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to create reservation")
        return internal_error_response()

    logger.info(
        "Reservation created",
        extra={
            "reservation_id": str(reservation.id),
            "pnr": str(reservation.pnr),
            "seat": reservation.seat.code,
        },
    )
    return api_response(201, to_response(reservation))


def _to_reservation_details(request: CreateReservationRequest) -> ReservationDetails:
    """リクエストボディから ReservationDetails を構築する"""

    details: ReservationDetails = {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "email": request.email,
        "passport": request.passport,
        "seat": request.seat,
        "baggage": request.baggage,
    }
    if request.meal_option is not None:
        details["meal_label"] = request.meal_option.label
        details["meal_price"] = request.meal_option.price
    return details
