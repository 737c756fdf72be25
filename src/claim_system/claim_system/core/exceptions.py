class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class DuplicateLecturerIdError(ValidationError):
    """Raised when registering a lecturer id that already exists."""


class LecturerNotFoundError(DomainError):
    """Raised when no lecturer matches the requested id."""


class ClaimNotFoundError(DomainError):
    """Raised when no claim matches the requested id."""


class AttachmentError(DomainError):
    """Base class for supporting document failures."""


class InvalidFileTypeError(AttachmentError):
    pass


class FileTooLargeError(AttachmentError):
    pass


class AttachmentNotFoundError(AttachmentError):
    pass


class AttachmentOpenError(AttachmentError):
    """Platform could not open the file. Callers report it and carry on."""


class StorageError(DomainError):
    """Raised when a JSON data file cannot be read or written."""
