from __future__ import annotations

from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class Bill:
    """請求内容

    total は常に base_fare + meal_price + baggage_surcharge から算出する。
    """

    base_fare: Money
    meal_price: Money
    baggage_surcharge: Money

    @property
    def total(self) -> Money:
        return Money.total(self.base_fare, self.meal_price, self.baggage_surcharge)

    def amount_due_since(self, previous: Bill) -> Money:
        """previous からの追加請求額（減額の場合は 0）"""
        return self.total.increase_from(previous.total)
