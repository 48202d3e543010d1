from abc import ABC, abstractmethod
from decimal import Decimal

from services.reservation.domain.value_object import Baggage
from services.shared.domain import Currency, Money


class BaggageSurchargeRule(ABC):
    """手荷物重量から追加料金を算出するルール

    実装は重量に対して単調非減少でなければならない。
    """

    @abstractmethod
    def surcharge(self, baggage: Baggage, currency: Currency) -> Money:
        raise NotImplementedError


class NoBaggageSurcharge(BaggageSurchargeRule):
    """手荷物を料金に反映しない（重量は記録のみ）"""

    def surcharge(self, baggage: Baggage, currency: Currency) -> Money:
        return Money.zero(currency)


class PerKilogramBaggageSurcharge(BaggageSurchargeRule):
    """無料許容量を超えた重量 1kg ごとに定額を課金する"""

    def __init__(self, free_allowance_kg: int, rate_per_kg: Decimal) -> None:
        if free_allowance_kg < 0:
            raise ValueError("Free allowance cannot be negative")
        if rate_per_kg < 0:
            raise ValueError("Rate per kg cannot be negative")
        self._free_allowance_kg = free_allowance_kg
        self._rate_per_kg = rate_per_kg

    def surcharge(self, baggage: Baggage, currency: Currency) -> Money:
        excess_kg = max(0, baggage.kg - self._free_allowance_kg)
        return Money(amount=self._rate_per_kg * excess_kg, currency=currency)
