from services.shared.domain.enum import FlightStatus

from .sort_criterion import SortCriterion

__all__ = ["FlightStatus", "SortCriterion"]
