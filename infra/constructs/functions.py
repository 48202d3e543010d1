from dataclasses import dataclass

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

RESERVATION_SERVICE = "reservation-service"
USER_SERVICE = "user-service"


@dataclass(frozen=True)
class FunctionDefinition:
    """Lambda 関数の定義（ハンドラーとテーブル権限）"""

    id: str
    handler: str
    service_name: str
    writes: bool = False


FUNCTION_DEFINITIONS: dict[str, FunctionDefinition] = {
    "booking_form": FunctionDefinition(
        "BookingFormLambda",
        "services.reservation.handlers.booking_form.lambda_handler",
        RESERVATION_SERVICE,
    ),
    "create_reservation": FunctionDefinition(
        "CreateReservationLambda",
        "services.reservation.handlers.create.lambda_handler",
        RESERVATION_SERVICE,
        writes=True,
    ),
    "edit_form": FunctionDefinition(
        "EditFormLambda",
        "services.reservation.handlers.edit_form.lambda_handler",
        RESERVATION_SERVICE,
    ),
    "update_reservation": FunctionDefinition(
        "UpdateReservationLambda",
        "services.reservation.handlers.update.lambda_handler",
        RESERVATION_SERVICE,
        writes=True,
    ),
    "list_reservations": FunctionDefinition(
        "ListReservationsLambda",
        "services.reservation.handlers.list_reservations.lambda_handler",
        RESERVATION_SERVICE,
    ),
    "get_reservation": FunctionDefinition(
        "GetReservationLambda",
        "services.reservation.handlers.get_reservation.lambda_handler",
        RESERVATION_SERVICE,
    ),
    "cancel_reservation": FunctionDefinition(
        "CancelReservationLambda",
        "services.reservation.handlers.cancel.lambda_handler",
        RESERVATION_SERVICE,
        writes=True,
    ),
    "user_reservations": FunctionDefinition(
        "UserReservationsLambda",
        "services.reservation.handlers.user_reservations.lambda_handler",
        RESERVATION_SERVICE,
    ),
    "register_user": FunctionDefinition(
        "RegisterUserLambda",
        "services.user.handlers.register.lambda_handler",
        USER_SERVICE,
        writes=True,
    ),
    "add_user": FunctionDefinition(
        "AddUserLambda",
        "services.user.handlers.add.lambda_handler",
        USER_SERVICE,
        writes=True,
    ),
    "list_users": FunctionDefinition(
        "ListUsersLambda",
        "services.user.handlers.list_users.lambda_handler",
        USER_SERVICE,
    ),
    "get_user": FunctionDefinition(
        "GetUserLambda",
        "services.user.handlers.get_user.lambda_handler",
        USER_SERVICE,
    ),
    "update_user": FunctionDefinition(
        "UpdateUserLambda",
        "services.user.handlers.update_user.lambda_handler",
        USER_SERVICE,
        writes=True,
    ),
    "delete_user": FunctionDefinition(
        "DeleteUserLambda",
        "services.user.handlers.delete_user.lambda_handler",
        USER_SERVICE,
        writes=True,
    ),
    "change_password": FunctionDefinition(
        "ChangePasswordLambda",
        "services.user.handlers.change_password.lambda_handler",
        USER_SERVICE,
        writes=True,
    ),
}


class Functions(Construct):
    """Lambda 関数を管理する Construct

    1つの API 操作につき1つの関数。参照系はテーブルの読み取り権限のみ付与する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        fare_settings: dict[str, str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.functions: dict[str, _lambda.Function] = {}
        for name, definition in FUNCTION_DEFINITIONS.items():
            fn = self._create_function(
                definition, table, common_layer, fare_settings or {}
            )
            if definition.writes:
                table.grant_read_write_data(fn)
            else:
                table.grant_read_data(fn)
            self.functions[name] = fn

    def _create_function(
        self,
        definition: FunctionDefinition,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        fare_settings: dict[str, str],
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            definition.id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=definition.handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            memory_size=256,
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": definition.service_name,
                **fare_settings,
            },
        )
