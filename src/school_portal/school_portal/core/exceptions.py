class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidStatusError(ValidationError):
    """Raised when an attendance status is not one of the known values."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when an actor lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""


class DuplicateUsernameError(ConflictError):
    pass


class ClassOwnershipConflictError(ConflictError):
    pass


class DuplicateStudentCodeError(ConflictError):
    pass


class AmbiguousOwnershipError(DomainError):
    """Raised when more than one class is owned by the same admin.

    The schema forbids this, so seeing it means the data is inconsistent.
    """
