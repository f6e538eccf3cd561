from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.shared.utils import to_decimal


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ

    ID の正負はオーケストレーターが判定する（乗客ディレクトリ縮退時の扱いがあるため）。
    """

    flight_id: int = Field(..., description="フライトID", examples=[1])
    passenger_id: int = Field(..., description="乗客ID", examples=[101])
    seat_selection: str | None = Field(
        default=None,
        description="座席ID（数値文字列）。数値以外や未指定は未割り当て",
        examples=["12", ""],
    )
    luggage_count: int = Field(default=0, ge=0, description="手荷物の個数")
    luggage_weight: Decimal = Field(
        default=Decimal("0"), ge=0, description="手荷物の重量"
    )

    @field_validator("seat_selection", mode="before")
    @classmethod
    def convert_seat_to_str(cls, v):
        """数値で送られてきた座席IDも文字列として受け付ける"""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("luggage_weight", mode="before")
    @classmethod
    def convert_weight_to_decimal(cls, v):
        """Decimalに変換する（未指定の null は 0）"""
        return to_decimal(v) if v is not None else Decimal("0")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flight_id": 1,
                    "passenger_id": 101,
                    "seat_selection": "12",
                    "luggage_count": 1,
                    "luggage_weight": "18.5",
                }
            ]
        }
    }
