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
from services.reservation.applications.update_reservation import (
    ReservationChanges,
    UpdateReservationService,
)
from services.reservation.domain.service import FarePolicy, SeatAvailabilityChecker
from services.reservation.handlers.request_models import UpdateReservationRequest
from services.reservation.handlers.response_models import to_update_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
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

logger = Logger()

reservation_repository = DynamoDBReservationRepository()
service = UpdateReservationService(
    reservation_repository=reservation_repository,
    flight_repository=DynamoDBFlightRepository(),
    fare_policy=FarePolicy.from_env(),
    seat_checker=SeatAvailabilityChecker(reservation_repository),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約変更 Lambda Handler"""

    try:
        reservation_id = path_parameter(event, "id")
        logger.info(
            "Received update reservation request",
            extra={"reservation_id": reservation_id},
        )
        request = UpdateReservationRequest.model_validate(parse_json_body(event.body))
        result = service.update(reservation_id, _to_changes(request))
    except ValidationError as e:
        return validation_error_response(e)
    except ValueError as e:
        return bad_request_response(str(e))
    except DomainException as e:
        logger.warning("Reservation update rejected", extra={"reason": str(e)})
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to update reservation")
        return internal_error_response()

    logger.info(
        "Reservation updated",
        extra={
            "reservation_id": str(result.reservation.id),
            "amount_due": str(result.amount_due.amount),
        },
    )
    return api_response(200, to_update_response(result))


def _to_changes(request: UpdateReservationRequest) -> ReservationChanges:
    """リクエストで指定された項目のみを変更内容にする"""

    changes: ReservationChanges = {}
    if request.seat:
        changes["seat"] = request.seat
    if request.meal_option is not None:
        changes["meal_label"] = request.meal_option.label
        changes["meal_price"] = request.meal_option.price
    if "baggage" in request.model_fields_set:
        changes["baggage"] = request.baggage
    return changes
