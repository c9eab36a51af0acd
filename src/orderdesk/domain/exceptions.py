"""Domain-level exceptions.

Every error raised by orderdesk derives from DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Collaborator failures (fetching records, mutating them remotely) have
their own branch so screens can catch exactly those at the boundary.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value was rejected (bad status, rating out of range, ...)."""


class CollaboratorError(DomainException):
    """An external collaborator (backend, file store) failed."""


class FetchFailure(CollaboratorError):
    """Fetching the record collection failed."""


class MutationFailure(CollaboratorError):
    """A status update or delete was rejected."""
