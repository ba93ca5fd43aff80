"""Domain-level exceptions.

Every error raised by the package is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User input was rejected."""


class ConfigKeyNotFoundError(DomainException):
    """A requested configuration key does not exist."""


class FileAccessError(DomainException):
    """The configuration file could not be read or written."""


class DuplicationError(DomainException):
    """An element owned by an order record could not be copied."""

    def __init__(self, message: str, element: object = None) -> None:
        super().__init__(message)
        self.element = element
