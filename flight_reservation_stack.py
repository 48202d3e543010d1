from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers

FARE_SETTING_KEYS = {
    "premium_rows": "PREMIUM_ROWS",
    "baggage_free_allowance_kg": "BAGGAGE_FREE_ALLOWANCE_KG",
    "baggage_rate_per_kg": "BAGGAGE_RATE_PER_KG",
}


class FlightReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            fare_settings=self._fare_settings(),
        )

        api = Api(
            self,
            "Api",
            functions=fns.functions,
            authorizer_function_arn=self.node.try_get_context(
                "authorizer_function_arn"
            ),
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)

    def _fare_settings(self) -> dict[str, str]:
        """CDK コンテキストで指定された運賃設定を環境変数にする"""
        settings: dict[str, str] = {}
        for context_key, env_name in FARE_SETTING_KEYS.items():
            value = self.node.try_get_context(context_key)
            if value is not None:
                settings[env_name] = str(value)
        return settings
