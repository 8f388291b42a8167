class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""


class NotFoundError(DomainError):
    """Raised when an employee lookup fails."""


class ConflictError(DomainError):
    """Raised when a new record clashes with an existing one."""


class DuplicateIdError(ConflictError):
    pass


class DuplicateNameError(ConflictError):
    pass


class AttendanceStateError(ValidationError):
    """Raised when a check-in/check-out is not allowed in the current day state."""


class AlreadyCheckedInError(AttendanceStateError):
    pass


class AlreadyCheckedOutError(AttendanceStateError):
    pass


class CheckInRequiredError(AttendanceStateError):
    pass


class PersistenceError(DomainError):
    """Raised when a JSON document cannot be written to disk."""
