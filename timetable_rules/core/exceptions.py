class AppError(Exception):
    """Base class for all timetable rule exceptions."""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

class MalformedInputError(AppError, ValueError):
    """Raised when a time or date value cannot be parsed.

    Subclasses ValueError so pydantic validators report it as a ValidationError.
    """
    def __init__(self, message: str, value=None):
        super().__init__(message, details={"value": value})
        self.value = value

class InvalidTimeFormat(MalformedInputError):
    """Raised when a time-of-day is not HH:MM 24-hour text."""
    def __init__(self, value):
        super().__init__(f"Time must be in HH:MM 24-hour format, got {value!r}", value=value)

class ConfigurationError(AppError):
    """Raised when a requirement table or policy is misconfigured."""
    def __init__(self, message: str):
        super().__init__(message)
