from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceTiers:
    """運賃（ファースト / ビジネス / エコノミー + 手荷物・重量の追加料金）

    各料金は未設定（None）を許容する。
    """

    first: Decimal | None = None
    business: Decimal | None = None
    economy: Decimal | None = None
    luggage: Decimal | None = None
    weight: Decimal | None = None

    def __post_init__(self) -> None:
        for name in ("first", "business", "economy", "luggage", "weight"):
            price = getattr(self, name)
            if price is not None and price < 0:
                raise ValueError(f"{name} price cannot be negative")

    @property
    def min_price(self) -> Decimal:
        """座席クラス運賃の最安値（正の値のみ対象、未設定なら 0）"""
        seat_prices = [
            price
            for price in (self.first, self.business, self.economy)
            if price is not None and price > 0
        ]
        return min(seat_prices, default=Decimal("0"))
