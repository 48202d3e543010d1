from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from services.shared.utils import CamelModel


class MealOptionRequest(CamelModel):
    """機内食の選択（未指定の場合は "None" / 0）"""

    label: str | None = None
    price: Decimal = Field(default=Decimal("0"), ge=0, description="機内食の料金")

    @field_validator("price", mode="before")
    @classmethod
    def empty_price_as_zero(cls, v):
        if v is None or v == "":
            return Decimal("0")
        return v


class CreateReservationRequest(CamelModel):
    """予約作成リクエストスキーマ"""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    passport: str = Field(..., min_length=1)
    seat: str = Field(..., min_length=1, examples=["12C"])
    flight_id: str = Field(..., min_length=1)
    meal_option: MealOptionRequest | None = None
    baggage: Any = Field(
        default=None,
        description="手荷物重量（kg）。先頭の整数を読み取り、読めない値は 0",
        examples=[23, "23kg"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                    "email": "ada@example.com",
                    "passport": "X1234567",
                    "seat": "3A",
                    "flightId": "f-001",
                    "mealOption": {"label": "Premium Meal", "price": 20},
                    "baggage": "23",
                }
            ]
        }
    }


class UpdateReservationRequest(CamelModel):
    """予約変更リクエストスキーマ（指定した項目のみ変更）"""

    seat: str | None = None
    meal_option: MealOptionRequest | None = None
    baggage: Any = None
