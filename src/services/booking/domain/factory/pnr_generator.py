import uuid

from services.booking.domain.value_object import Pnr


class PnrGenerator:
    """PNR を生成する

    ランダムな UUID の先頭6文字を大文字にしたもの。
    一意性は予約ストアの条件付き書き込みで保証する。
    """

    LENGTH = 6

    def generate(self) -> Pnr:
        return Pnr(value=uuid.uuid4().hex[: self.LENGTH].upper())
