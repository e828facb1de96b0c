"""Domain layer errors.

Empty results are never errors. Errors here signal that a result cannot be
trusted, not that nothing matched.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class StoreAccessError(DomainError):
    """Raised when the tag catalog or an entity store cannot be read.

    Covers unreachable stores and rows that cannot be mapped to domain models.
    """

    def __init__(self, store: str, operation: str, reason: str):
        self.store = store
        self.operation = operation
        self.reason = reason
        super().__init__(f"{store} failed during {operation}: {reason}")
