from botocore.exceptions import ClientError


def query_all(table, **kwargs) -> list[dict]:
    """Query をページングしながら全件取得する"""
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def scan_all(table, **kwargs) -> list[dict]:
    """Scan をページングしながら全件取得する"""
    items: list[dict] = []
    while True:
        response = table.scan(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key


def cancellation_codes(e: ClientError) -> list[str]:
    """TransactionCanceledException の各アクションの失敗理由コード

    TransactItems と同じ順序で返る。成功したアクションは "None"。
    """
    reasons = e.response.get("CancellationReasons", [])
    return [reason.get("Code", "None") for reason in reasons]
