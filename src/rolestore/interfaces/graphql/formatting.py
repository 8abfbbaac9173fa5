"""Display formatting for role fields."""

from datetime import UTC, datetime

# Casing differs between the two values; existing clients match on them verbatim.
ACTIVE = "Active"
INACTIVE = "INACTIVE"
STILL_ACTIVE = "Still Active"


def format_active(active: bool) -> str:
    return ACTIVE if active else INACTIVE


def format_timestamp(value: datetime, date_format: str) -> str:
    """Format in UTC so output does not depend on the session TimeZone."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(date_format)


def format_end_date(value: datetime | None, date_format: str) -> str:
    """Formatted end date, or STILL_ACTIVE for an ongoing role."""
    if value is None:
        return STILL_ACTIVE
    return format_timestamp(value, date_format)
