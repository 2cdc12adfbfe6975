from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    IllegalStateException as IllegalStateException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    RoomAlreadyOccupiedException as RoomAlreadyOccupiedException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .value_object import (
    Identity as Identity,
)
from .value_object import (
    Money as Money,
)
