from services.shared.domain.exception import ResourceNotFoundException


class FlightNotBookableException(ResourceNotFoundException):
    """フライトは存在するが予約を受け付けないステータスの場合

    呼び出し側には「フライトが見つからない」として扱われる。
    """

    def __init__(self, flight_id: int, status: str) -> None:
        super().__init__(f"Flight not found with id: {flight_id} (status: {status})")
        self.flight_id = flight_id
        self.status = status
