from __future__ import annotations

from dataclasses import dataclass

from services.shared.utils.validators import parse_leading_int


@dataclass(frozen=True)
class Baggage:
    """受託手荷物（重量 kg、0 以上の整数）"""

    kg: int = 0

    def __post_init__(self) -> None:
        if self.kg < 0:
            raise ValueError("Baggage weight cannot be negative")

    @classmethod
    def parse(cls, value: object) -> Baggage:
        """入力値を寛容に解釈する

        先頭の整数部分を重量とし、読み取れない値や負の値は 0 kg とする。
        """
        return cls(kg=max(0, parse_leading_int(value, default=0)))
