from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    """メールアドレス（前後の空白を除去し小文字で保持）"""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        local, _, domain = normalized.partition("@")
        if not local or not domain:
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
