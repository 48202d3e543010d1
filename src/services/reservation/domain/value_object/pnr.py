import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Pnr:
    """予約番号（PNR）

    英大文字と数字の6文字。例: X7K2QM
    """

    value: str

    LENGTH: ClassVar[int] = 6
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{6}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid PNR format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
