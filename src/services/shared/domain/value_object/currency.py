from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    運賃・機内食・手荷物料金は同じ通貨で扱う。既定は USD。
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"EUR", "JPY", "USD"})
    DEFAULT_CODE: ClassVar[str] = "USD"

    code: str

    def __post_init__(self) -> None:
        normalized = (self.code or "").strip().upper()
        if normalized not in self.SUPPORTED:
            supported = ", ".join(sorted(self.SUPPORTED))
            raise ValueError(f"Unsupported currency: {self.code} ({supported})")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def of(cls, code: str | None) -> Currency:
        """保存値から生成する（未設定の場合は既定通貨）"""
        return cls(code) if code else cls.default()

    @classmethod
    def default(cls) -> Currency:
        return cls(cls.DEFAULT_CODE)
