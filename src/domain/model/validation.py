"""Field presence and length rules shared by the resource services."""

from datetime import datetime, timezone

from domain.model.errors import MissingFieldsError, ValidationError


def require_fields(**values) -> None:
    """Raise MissingFieldsError naming every value that is None or blank.

    Keyword names are the wire names reported back to the client.
    """
    missing = [
        name for name, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise MissingFieldsError(missing)


def check_max_length(field_name: str, value: str | None, max_length: int) -> None:
    if value is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")


def clean(value: str | None) -> str | None:
    """Trim surrounding whitespace, mapping blank strings to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_email(email: str | None) -> str | None:
    email = clean(email)
    return email.lower() if email else None


def parse_datetime(field_name: str, value: str | datetime) -> datetime:
    """Parse an ISO-8601 date or datetime; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(f"{field_name} must be an ISO-8601 date")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
