from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .enum import FlightStatus as FlightStatus
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DependencyUnavailableException as DependencyUnavailableException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InvalidArgumentException as InvalidArgumentException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    LookupOutcome as LookupOutcome,
)
from .value_object import (
    LookupResult as LookupResult,
)
