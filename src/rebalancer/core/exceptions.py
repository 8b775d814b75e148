"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidInputError(ValidationError):
    """Raised for a negative amount or a malformed numeric string."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_INPUT")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class DivisionByZeroError(AppError):
    """Raised when a fraction is computed against a zero total."""

    def __init__(self, what: str):
        super().__init__(f"Cannot compute {what}: division by zero", code="DIVISION_BY_ZERO")


class DegenerateAllocationWarning(UserWarning):
    """
    Emitted when leftover cash must be distributed but every target fraction is zero.

    Non-fatal: the leftover is assigned to the first asset in portfolio order.
    """

    def __init__(self, recipient: str, leftover: str):
        self.recipient = recipient
        self.leftover = leftover
        super().__init__(
            f"All target fractions are zero; assigning leftover {leftover} to {recipient}"
        )
