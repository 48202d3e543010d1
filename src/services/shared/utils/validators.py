import re
from decimal import Decimal

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def parse_leading_int(v: object, default: int = 0) -> int:
    """先頭の整数部分を読み取る（読み取れない場合は default）

    "23kg" -> 23, "12.7" -> 12, "abc" -> default, None -> default
    """
    if isinstance(v, bool) or v is None:
        return default
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v == v and abs(v) != float("inf") else default
    match = _LEADING_INT.match(str(v))
    if match is None:
        return default
    return int(match.group(1))
