from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain import CallerIdentity


def caller_from_event(event: APIGatewayProxyEvent) -> CallerIdentity:
    """Authorizer コンテキストから呼び出し元を取得する"""
    request_context = event.raw_event.get("requestContext") or {}
    return CallerIdentity.from_authorizer_context(request_context.get("authorizer"))


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    """必須のパスパラメータを取得する"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValueError(f"{name} is required")
    return value


def query_parameter(event: APIGatewayProxyEvent, name: str) -> str | None:
    """任意のクエリパラメータを取得する（空文字は None）"""
    value = (event.query_string_parameters or {}).get(name)
    return value or None
