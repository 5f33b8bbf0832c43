"""Opaque record identifiers."""
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value) -> bool:
    """True when ``value`` parses as a record identifier."""
    if not isinstance(value, str) or not value:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def normalize_id(value: str) -> str:
    """Canonical storage form of a valid identifier."""
    return uuid.UUID(value).hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
