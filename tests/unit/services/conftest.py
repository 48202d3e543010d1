import json
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラーモジュールは import 時に boto3 リソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test-service")

from services.flight.domain.entity import Flight  # noqa: E402
from services.flight.domain.value_object import FlightId, FlightNumber  # noqa: E402
from services.shared.domain import (  # noqa: E402
    CallerIdentity,
    Currency,
    IsoDateTime,
    Money,
    Role,
)

FIXED_NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """テストで使う現在時刻（固定）"""
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def guest() -> CallerIdentity:
    return CallerIdentity.anonymous()


@pytest.fixture
def member() -> CallerIdentity:
    return CallerIdentity(user_id="user-1", role=Role.USER)


@pytest.fixture
def admin() -> CallerIdentity:
    return CallerIdentity(user_id="admin-1", role=Role.ADMIN)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "test-request-id"


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
        caller: CallerIdentity | None = None,
        method: str = "GET",
        path: str = "/",
    ) -> dict:
        authorizer = None
        if caller is not None and caller.is_authenticated:
            authorizer = {"user_id": caller.user_id, "role": caller.role.value}
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": query_string_parameters,
            "pathParameters": path_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {
                "requestId": "test-request",
                "stage": "prod",
                "authorizer": authorizer,
            },
        }

    return _factory


@pytest.fixture
def create_flight(now):
    """Flight を生成する Factory fixture（Factories as fixtures パターン）

    既定では now の1日後に出発する価格 100 USD のフライト。
    """

    def _factory(
        flight_id: str = "F1",
        flight_number: str = "NH001",
        schedule: datetime | None = None,
        price_amount: Decimal = Decimal("100"),
        currency: str = "USD",
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            flight_number=FlightNumber(value=flight_number),
            schedule=IsoDateTime(schedule or now + timedelta(days=1)),
            price=Money(amount=price_amount, currency=Currency(currency)),
        )

    return _factory
