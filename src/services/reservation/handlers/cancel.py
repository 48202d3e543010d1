from urllib.parse import urlencode

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.cancel_reservation import (
    CancelReservationService,
)
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.utils import (
    bad_request_response,
    caller_from_event,
    internal_error_response,
    path_parameter,
    redirect_response,
)

logger = Logger()

repository = DynamoDBReservationRepository()
service = CancelReservationService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler

    キャンセル後は呼び出し元の予約一覧へリダイレクトする。
    """

    try:
        reservation_id = path_parameter(event, "id")
        reservation = service.cancel(reservation_id)
    except ValueError as e:
        return bad_request_response(str(e))
    except Exception:
        logger.exception("Failed to cancel reservation")
        return internal_error_response()

    if reservation is None:
        logger.info(
            "Reservation to cancel not found", extra={"reservation_id": reservation_id}
        )
    else:
        logger.info(
            "Reservation cancelled",
            extra={"reservation_id": reservation_id, "pnr": str(reservation.pnr)},
        )

    caller = caller_from_event(event)
    query = urlencode({"userId": caller.user_id or ""})
    return redirect_response(f"/reservations?{query}")
