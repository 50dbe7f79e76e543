"""Domain-level exceptions.

All guard failures are expressed as subclasses of DomainException so the
web and CLI layers can catch them uniformly. Each class carries the HTTP
status code the failure is reported with.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainException):
    """A field, cross-field or state rule was violated by the request."""

    status_code = 400


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404
