# stayintouch/models/fields.py
from datetime import datetime, timezone
from bson import ObjectId
from bson.errors import InvalidId
from ..errors import ContactValidationError


def to_object_id(value):
    """Returns value as an ObjectId, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def utcnow():
    """Current UTC time at the millisecond precision BSON dates are stored with."""
    return truncate_to_millis(datetime.utcnow())


def truncate_to_millis(value):
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def parse_datetime(value):
    """Accepts a datetime or an ISO-8601 string and returns a naive UTC datetime."""
    if value is None or isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError as e:
            raise ContactValidationError(f"'{value}' is not a valid date.") from e
    else:
        raise ContactValidationError(f"'{value}' is not a valid date.")

    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return truncate_to_millis(parsed) if parsed is not None else None


def format_datetime(value):
    return value.isoformat() if value else None
