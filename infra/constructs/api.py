from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    authorizer_function_arn を指定した場合、利用者登録以外のルートに
    外部の Lambda Authorizer を設定する。Authorizer はゲストを含めて
    呼び出し元を判定し、requestContext.authorizer に user_id / role を設定する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: dict[str, _lambda.IFunction],
        authorizer_function_arn: str | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Flight Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        authorizer: apigw.IAuthorizer | None = None
        if authorizer_function_arn:
            authorizer_fn = _lambda.Function.from_function_arn(
                self, "CallerAuthorizerFn", authorizer_function_arn
            )
            # identity source なし: ヘッダーの無いゲストのリクエストも Authorizer を通る
            authorizer = apigw.RequestAuthorizer(
                self,
                "CallerAuthorizer",
                handler=authorizer_fn,
                identity_sources=[],
                results_cache_ttl=Duration.seconds(0),
            )

        def route(
            resource: apigw.IResource,
            method: str,
            function_name: str,
            public: bool = False,
        ) -> None:
            resource.add_method(
                method,
                apigw.LambdaIntegration(functions[function_name]),
                authorizer=None if public else authorizer,
            )

        # /reservations
        reservations = self.rest_api.root.add_resource("reservations")
        route(reservations, "GET", "list_reservations")
        route(reservations, "POST", "create_reservation")

        book = reservations.add_resource("book").add_resource("{flightNumber}")
        route(book, "GET", "booking_form")

        user_reservations = (
            reservations.add_resource("users")
            .add_resource("{userId}")
            .add_resource("reservations")
        )
        route(user_reservations, "GET", "user_reservations")

        reservation = reservations.add_resource("{id}")
        route(reservation, "GET", "get_reservation")
        route(reservation, "PUT", "update_reservation")
        route(reservation.add_resource("edit"), "GET", "edit_form")
        route(reservation.add_resource("cancel"), "POST", "cancel_reservation")

        # /users
        users = self.rest_api.root.add_resource("users")
        route(users, "GET", "list_users")
        route(users, "POST", "register_user", public=True)
        route(users.add_resource("add"), "POST", "add_user")
        route(users.add_resource("change-password"), "POST", "change_password")

        user = users.add_resource("{id}")
        route(user, "GET", "get_user")
        route(user, "PUT", "update_user")
        route(user, "DELETE", "delete_user")
