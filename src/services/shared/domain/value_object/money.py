from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    負の金額は持たない。異なる通貨同士の演算は ValueError。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError(f"Money amount must not be negative: {self.amount}")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + self._same_currency(other).amount, self.currency)

    def increase_from(self, previous: Money) -> Money:
        """previous からの増加分（減少・同額なら 0）"""
        delta = self.amount - self._same_currency(previous).amount
        return Money(delta if delta > 0 else Decimal("0"), self.currency)

    def _same_currency(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValueError(
                f"Currency mismatch: {self.currency} and {other.currency}"
            )
        return other

    @classmethod
    def total(cls, first: Money, *rest: Money) -> Money:
        """同じ通貨の金額を合計する"""
        result = first
        for money in rest:
            result = result + money
        return result

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)
