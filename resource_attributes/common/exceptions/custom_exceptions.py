"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class AttributeValidationError(ApplicationError):
    """Exception raised when an attribute value breaks the value model invariants."""

    UNRECOGNIZED_UNIT = "unrecognized_unit"
    UNIT_NOT_ALLOWED = "unit_not_allowed"
    NO_VALUE = "no_value"
    MULTIPLE_VALUES = "multiple_values"
    KIND_MISMATCH = "kind_mismatch"

    def __init__(
        self,
        message: str = "Invalid attribute",
        reason: str | None = None,
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.reason = reason
