from .validators import to_decimal, to_int, to_query_decimal

__all__ = ["to_decimal", "to_int", "to_query_decimal"]
