"""Request field parsing."""

from datetime import date, datetime


class ValidationFailed(ValueError):
    """A request field is missing or malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_details(self) -> dict:
        return {self.field: self.message}


def parse_int(
    value, field: str, minimum: int | None = None, maximum: int | None = None
) -> int:
    """Parse an integer field, optionally bounded (inclusive)."""
    if isinstance(value, bool):
        value = None  # true/false are not counts
    if isinstance(value, float) and not value.is_integer():
        raise ValidationFailed(field, f"{field} must be a whole number")
    try:
        number = int(value)
    except (ValueError, TypeError):
        raise ValidationFailed(field, f"{field} must be an integer")

    too_small = minimum is not None and number < minimum
    too_large = maximum is not None and number > maximum
    if too_small or too_large:
        if minimum is not None and maximum is not None:
            message = f"{field} must be an integer between {minimum} and {maximum}"
        elif minimum is not None:
            message = f"{field} must be at least {minimum}"
        else:
            message = f"{field} must be at most {maximum}"
        raise ValidationFailed(field, message)
    return number


def parse_date(value, field: str, default: date | None = None) -> date:
    """Parse an ISO date (YYYY-MM-DD); missing values fall back to default."""
    if value in (None, ""):
        if default is None:
            raise ValidationFailed(field, f"{field} is required")
        return default
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationFailed(field, f"{field} must be an ISO date (YYYY-MM-DD)")


def parse_datetime(value, field: str, default: datetime | None = None) -> datetime:
    """Parse an ISO timestamp; missing values fall back to default."""
    if value in (None, ""):
        if default is None:
            raise ValidationFailed(field, f"{field} is required")
        return default
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationFailed(field, f"{field} must be an ISO timestamp")
