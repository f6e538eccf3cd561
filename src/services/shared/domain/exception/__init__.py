from .exceptions import (
    BusinessRuleViolationException,
    DependencyUnavailableException,
    DomainException,
    DuplicateResourceException,
    InvalidArgumentException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "DependencyUnavailableException",
]
