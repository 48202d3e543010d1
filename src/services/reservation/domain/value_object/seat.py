from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Seat:
    """座席（座席コード + プレミアム席フラグ）

    座席コードは列番号 + 座席記号（例: 12C）。
    先頭に数字が無いコードは列番号 0 として扱う。
    """

    code: str
    is_premium: bool = False

    LEADING_ROW: ClassVar[re.Pattern[str]] = re.compile(r"^\d+")

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if not normalized:
            raise ValueError("Seat code cannot be empty")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def row(self) -> int:
        return self.row_of(self.code)

    @classmethod
    def row_of(cls, code: str) -> int:
        """座席コードから列番号を読み取る"""
        match = cls.LEADING_ROW.match(code.strip())
        return int(match.group(0)) if match else 0
