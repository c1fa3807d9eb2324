"""
Errors raised by the persistence handle.

These never reach the client directly: the model registry translates them
into non-operational AppErrors.
"""


class PersistenceError(Exception):
    """Base error for the persistence handle."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ModelAlreadyExistsError(PersistenceError):
    """Raised when a model is created under a name that is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Model already exists: {name}")
        self.name = name


class ModelCreationError(PersistenceError):
    """Raised when a model cannot be created (missing or malformed schema, DDL failure)."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Cannot create model '{name}': {reason}")
        self.name = name
        self.reason = reason
