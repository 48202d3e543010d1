from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """搭乗者情報（予約作成後は変更不可）"""

    first_name: str
    last_name: str
    email: str
    passport: str

    def __post_init__(self) -> None:
        for field_name in ("first_name", "last_name", "email", "passport"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise ValueError(f"{field_name} cannot be empty")
            object.__setattr__(self, field_name, value.strip())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
