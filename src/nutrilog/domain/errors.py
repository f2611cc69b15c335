"""Error taxonomy shared by the domain core and its collaborators."""


class InvalidArgumentError(ValueError):
    """Raised when a caller supplies missing, blank, negative or malformed input."""


class InvariantViolationError(RuntimeError):
    """Raised when an internal consistency check fails after a mutation."""


class StorageError(OSError):
    """Base class for recoverable I/O failures in collaborators."""


class ExportError(StorageError):
    """Raised when nutrition data cannot be exported."""


class PersistenceError(StorageError):
    """Raised when a model snapshot cannot be written."""
