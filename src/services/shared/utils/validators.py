from decimal import Decimal, InvalidOperation

from services.shared.domain.exception import InvalidArgumentException


def to_decimal(v: object) -> Decimal | None:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    None はそのまま返す（価格未設定）。float は str 経由で変換して誤差を避ける。
    """
    if v is None or isinstance(v, Decimal):
        return v
    try:
        d = Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {v}") from e
    if not d.is_finite():
        raise ValueError(f"Decimal value must be finite: {v}")
    return d


def to_int(value: str | None, name: str) -> int:
    """パスパラメータ・クエリ文字列を整数に変換する"""
    if value is None or not value.strip():
        raise InvalidArgumentException(f"{name} is required")
    try:
        return int(value)
    except ValueError as e:
        raise InvalidArgumentException(f"{name} must be an integer: {value}") from e


def to_query_decimal(value: str | None, name: str) -> Decimal:
    """クエリ文字列を Decimal に変換する（NaN・Infinity は不可）"""
    if value is None or not value.strip():
        raise InvalidArgumentException(f"{name} is required")
    try:
        d = Decimal(value)
    except InvalidOperation as e:
        raise InvalidArgumentException(f"{name} must be a number: {value}") from e
    if not d.is_finite():
        raise InvalidArgumentException(f"{name} must be a finite number: {value}")
    return d
