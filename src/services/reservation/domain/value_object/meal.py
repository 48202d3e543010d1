from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain import Currency, Money

NO_MEAL_LABEL = "None"


@dataclass(frozen=True)
class Meal:
    """機内食の選択（ラベル + 料金）"""

    label: str
    price: Money

    def __post_init__(self) -> None:
        label = (self.label or "").strip()
        object.__setattr__(self, "label", label or NO_MEAL_LABEL)

    @classmethod
    def none(cls, currency: Currency) -> Meal:
        """機内食なし（0円）"""
        return cls(label=NO_MEAL_LABEL, price=Money.zero(currency))

    @classmethod
    def from_option(
        cls, label: str | None, price: Decimal | None, currency: Currency
    ) -> Meal:
        """リクエストの選択内容から生成する（未指定の値は既定値）"""
        return cls(
            label=label or NO_MEAL_LABEL,
            price=Money(amount=price or Decimal("0"), currency=currency),
        )
