import json

from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    AuthenticationException,
    AuthorizationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

# 上から順に判定する（サブクラスを先に置く）
_ERROR_MAPPING: list[tuple[type[DomainException], int, str]] = [
    (ResourceNotFoundException, 404, "NOT_FOUND"),
    (AuthenticationException, 401, "UNAUTHORIZED"),
    (AuthorizationException, 403, "FORBIDDEN"),
    (DuplicateResourceException, 400, "CONFLICT"),
    (OptimisticLockException, 409, "CONCURRENT_MODIFICATION"),
    (BusinessRuleViolationException, 400, "BUSINESS_RULE_VIOLATION"),
]

MISSING_FIELDS_MESSAGE = "Missing required fields."


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def api_response(status_code: int, body: dict, headers: dict | None = None) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(body, default=str),
    }


def redirect_response(location: str) -> dict:
    """303 See Other でリダイレクトする"""
    return {
        "statusCode": 303,
        "headers": {"Location": location},
        "body": "",
    }


def parse_json_body(raw_body: str | None) -> dict:
    """リクエストボディを辞書として読み込む（空の場合は空辞書）"""
    if not raw_body:
        return {}
    try:
        body = json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise ValueError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def domain_error_response(e: DomainException) -> dict:
    """ドメイン例外を HTTP レスポンスに変換する"""
    for exception_type, status_code, error_code in _ERROR_MAPPING:
        if isinstance(e, exception_type):
            return error_response(status_code, error_code, str(e))
    return error_response(400, "DOMAIN_ERROR", str(e))


def validation_error_response(
    e: ValidationError, missing_message: str = MISSING_FIELDS_MESSAGE
) -> dict:
    """Pydantic のバリデーションエラーを 400 レスポンスに変換する

    必須項目の欠落（空文字を含む）は missing_message にまとめる。
    """
    errors = e.errors(include_url=False, include_context=False, include_input=False)
    details = [
        {"field": ".".join(str(loc) for loc in error["loc"]), "reason": error["msg"]}
        for error in errors
    ]
    if any(error["type"] in ("missing", "string_too_short") for error in errors):
        return error_response(400, "VALIDATION_ERROR", missing_message, details)
    return error_response(400, "VALIDATION_ERROR", "Invalid request.", details)


def internal_error_response() -> dict:
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


def bad_request_response(message: str) -> dict:
    return error_response(400, "VALIDATION_ERROR", message)
