"""API errors and validation helpers."""

from app.services.cycletime import WINDOWS


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_window(window: str) -> None:
    """Validate the report time window name."""
    if window not in WINDOWS:
        raise ValidationError(f"Invalid window: {window}. Must be one of: {', '.join(WINDOWS)}")
