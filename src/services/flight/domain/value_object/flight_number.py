import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    航空会社コード（英数字2文字）+ 便名番号（1-4桁）+ 任意の接尾英字。
    例: NH001, U21234, BA123A（"nh 001" のような入力は NH001 に正規化）
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<airline>[A-Z0-9]{2})(?P<number>\d{1,4})(?P<suffix>[A-Z]?)$"
    )

    def __post_init__(self) -> None:
        normalized = re.sub(r"\s+", "", self.value or "").upper()
        if self.PATTERN.fullmatch(normalized) is None:
            raise ValueError(f"Invalid flight number: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def _part(self, name: str) -> str:
        return self.PATTERN.fullmatch(self.value).group(name)

    @property
    def airline_code(self) -> str:
        return self._part("airline")

    @property
    def number(self) -> int:
        """便名番号（先頭ゼロは除く）"""
        return int(self._part("number"))
