"""環境変数から読み込む設定値

Lambda のコールドスタート時（Composition Root）に一度だけ読み込み、
ドメインサービスへ注入する。
"""

import os
from decimal import Decimal, InvalidOperation

DEFAULT_PREMIUM_ROWS = "1,2,3,4"


def premium_rows() -> frozenset[int]:
    """プレミアム席とする列番号の集合（PREMIUM_ROWS、カンマ区切り）"""
    raw = os.getenv("PREMIUM_ROWS", DEFAULT_PREMIUM_ROWS)
    rows: set[int] = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            raise ValueError(f"Invalid PREMIUM_ROWS entry: {part!r}")
        rows.add(int(part))
    return frozenset(rows)


def baggage_free_allowance_kg() -> int:
    """無料手荷物許容量（kg）"""
    raw = os.getenv("BAGGAGE_FREE_ALLOWANCE_KG", "0")
    if not raw.strip().isdigit():
        raise ValueError(f"Invalid BAGGAGE_FREE_ALLOWANCE_KG: {raw!r}")
    return int(raw)


def baggage_rate_per_kg() -> Decimal:
    """超過手荷物 1kg あたりの料金"""
    raw = os.getenv("BAGGAGE_RATE_PER_KG", "0")
    try:
        rate = Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"Invalid BAGGAGE_RATE_PER_KG: {raw!r}") from e
    if rate < 0:
        raise ValueError("BAGGAGE_RATE_PER_KG cannot be negative")
    return rate
