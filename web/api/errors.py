"""API errors and validation helpers."""

from app.models.inspection import COVERAGE_STATES


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Lookback range offered by the reporting period picker
MIN_DAYS = 1
MAX_DAYS = 365


def validate_days(days: int) -> None:
    """Validate lookback is in valid range."""
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise ValidationError(f"Invalid days: {days}. Must be between {MIN_DAYS} and {MAX_DAYS}")


def validate_page(page: int) -> None:
    """Validate page number (1-based)."""
    if page < 1:
        raise ValidationError(f"Invalid page: {page}. Must be 1 or greater")


def validate_keyword(keyword: str) -> None:
    """Validate a single keyword is not blank."""
    if not keyword or not keyword.strip():
        raise ValidationError("Keyword must not be empty")


def validate_coverage_state(coverage_state: str | None) -> None:
    """Validate an optional coverage state filter."""
    if coverage_state and coverage_state not in COVERAGE_STATES:
        raise ValidationError(f"Unknown coverage state: {coverage_state}")
