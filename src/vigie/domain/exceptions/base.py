"""
Base domain exceptions.
"""


class VigieException(Exception):
    """Base exception for all Vigie domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(VigieException):
    """Raised when user input fails validation."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.reason = reason


class MissingCredentialError(VigieException):
    """Raised when the token API key is absent or still a placeholder."""

    def __init__(self):
        super().__init__(
            "Token API key is not configured", code="MISSING_CREDENTIAL"
        )
