from __future__ import annotations

from services.reservation.domain.service.baggage_surcharge_rule import (
    BaggageSurchargeRule,
    NoBaggageSurcharge,
    PerKilogramBaggageSurcharge,
)
from services.reservation.domain.value_object import Baggage, Seat
from services.shared.domain import Currency, Money
from services.shared.utils import config


class FarePolicy:
    """座席区分と手荷物料金のルール

    プレミアム席の判定は記録のみで、料金には反映しない。
    """

    def __init__(
        self,
        premium_rows: frozenset[int],
        baggage_rule: BaggageSurchargeRule | None = None,
    ) -> None:
        self._premium_rows = frozenset(premium_rows)
        self._baggage_rule = baggage_rule or NoBaggageSurcharge()

    @property
    def premium_rows(self) -> frozenset[int]:
        return self._premium_rows

    def seat_for(self, code: str) -> Seat:
        """座席コードから Seat を生成する（プレミアム判定込み）"""
        return Seat(code=code, is_premium=Seat.row_of(code) in self._premium_rows)

    def baggage_surcharge(self, baggage: Baggage, currency: Currency) -> Money:
        return self._baggage_rule.surcharge(baggage, currency)

    @classmethod
    def from_env(cls) -> FarePolicy:
        """環境変数の設定から生成する"""
        rate = config.baggage_rate_per_kg()
        baggage_rule: BaggageSurchargeRule = NoBaggageSurcharge()
        if rate > 0:
            baggage_rule = PerKilogramBaggageSurcharge(
                free_allowance_kg=config.baggage_free_allowance_kg(),
                rate_per_kg=rate,
            )
        return cls(premium_rows=config.premium_rows(), baggage_rule=baggage_rule)
