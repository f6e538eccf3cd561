from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    BOOKED --cancel--> CANCELLED（終端）
    """

    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"
