class IdenticonError(Exception):
    """Base class for all identicon errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class IdenticonGenerationError(IdenticonError):
    """Raised when the pipeline breaks one of its own invariants.

    The pipeline is total over string input, so this always points at an
    internal bug rather than at bad input.
    """


class StorageError(IdenticonError):
    """Raised when a rendered identicon cannot be written to storage."""
