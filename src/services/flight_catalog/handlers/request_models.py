from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.shared.utils import to_decimal


class FlightRequest(BaseModel):
    """フライト登録・更新リクエストスキーマ"""

    carrier_id: int = Field(..., gt=0, description="航空会社ID", examples=[7])
    departure_airport_id: int = Field(..., gt=0, description="出発空港ID")
    arrival_airport_id: int = Field(..., gt=0, description="到着空港ID")

    departure_time: str | None = Field(
        default=None,
        description="出発時刻（ISO 8601形式）",
        examples=["2025-01-01T10:00:00", "2025-01-01 10:00"],
    )
    arrival_time: str | None = Field(
        default=None,
        description="到着時刻（ISO 8601形式）",
        examples=["2025-01-01T12:00:00"],
    )

    first_price: Decimal | None = Field(default=None, ge=0)
    business_price: Decimal | None = Field(default=None, ge=0)
    economy_price: Decimal | None = Field(default=None, ge=0)
    luggage_price: Decimal | None = Field(default=None, ge=0)
    weight_price: Decimal | None = Field(default=None, ge=0)

    status: str | None = Field(
        default=None,
        description="ステータス（未指定なら登録時は ON_TIME、更新時は現状維持）",
        examples=["ON_TIME", "DELAYED"],
    )

    @field_validator(
        "first_price",
        "business_price",
        "economy_price",
        "luggage_price",
        "weight_price",
        mode="before",
    )
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "carrier_id": 7,
                    "departure_airport_id": 1,
                    "arrival_airport_id": 2,
                    "departure_time": "2025-01-01T10:00:00",
                    "arrival_time": "2025-01-01T11:05:00",
                    "first_price": 1200,
                    "business_price": 650,
                    "economy_price": 180,
                }
            ]
        }
    }


class FlightStatusRequest(BaseModel):
    """ステータス更新リクエストスキーマ"""

    status: str = Field(..., min_length=1, examples=["DELAYED"])


class FlightLookupRequest(BaseModel):
    """予約サービスからのフライト照会リクエスト"""

    flight_id: int = Field(..., gt=0)
