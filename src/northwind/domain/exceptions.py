"""Domain-level exceptions.

Every failure an order operation can report is a subclass of
DomainException, so the CLI layer can catch them in one place and
translate each kind into its own message and exit code.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidArgumentError(DomainException, ValueError):
    """A caller-supplied argument is out of range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderNotFoundError(EntityNotFoundError):

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order with id {order_id} was not found.")
        self.order_id = order_id


class PersistenceError(DomainException):
    """The store could not complete an operation.

    Always raised ``from`` the underlying driver/ORM exception.
    """
