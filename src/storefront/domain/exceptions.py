"""Domain-level exceptions.

Every rejected catalog or cart operation is a subclass of DomainException,
so both the menu and the HTTP layer can catch one type and translate the
concrete subclass into a message or status code.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__("Product not found")
        self.product_id = product_id


class NotInCartError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__("Not in cart")
        self.product_id = product_id


class InsufficientStockError(ValidationError):
    """Requested quantity is larger than the stock on hand.

    ``merge`` is True when the failure came from adding to an existing
    cart entry, which the adapters report differently.
    """

    def __init__(
        self,
        product_id: int,
        requested: int,
        available: int,
        merge: bool = False,
    ) -> None:
        super().__init__("Exceeds stock" if merge else "Insufficient stock")
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.merge = merge


class EmptyCartError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Cart empty")


class DuplicateProductError(ValidationError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Duplicate product id in seed: {product_id}")
        self.product_id = product_id


class SeedError(DomainException):
    """The catalog seed could not be read or is malformed."""
