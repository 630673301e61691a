"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for missing or malformed input, unknown enum values and
    comments nested past the depth limit.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when the store rejects a write on a uniqueness constraint.

    The interaction ledger treats this as a signal to re-read and retry.
    """

    pass


class StorageError(DomainError):
    """Raised when the backing store fails (I/O, driver or transient errors)."""

    pass
