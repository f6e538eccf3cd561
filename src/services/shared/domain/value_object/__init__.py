from .iso_date_time import IsoDateTime
from .lookup_result import LookupOutcome, LookupResult

__all__ = ["IsoDateTime", "LookupOutcome", "LookupResult"]
