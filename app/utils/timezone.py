"""
Indian Standard Time helpers.

The mobile clients send UTC ISO strings (``Date.toISOString()``); posts store
IST wall-clock values so ``stime``/``up_date`` read the same in the admin app
and in the database.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

IST_OFFSET = timedelta(hours=5, minutes=30)
IST = timezone(IST_OFFSET, "IST")

# Values the clients send for an empty field
BLANK_VALUES = ("", "null", "undefined")


def ist_now() -> datetime:
    """Current IST wall-clock time as a naive datetime"""
    return (datetime.now(timezone.utc) + IST_OFFSET).replace(tzinfo=None, microsecond=0)


def to_ist(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Convert a client timestamp to naive IST.

    Aware values are normalised to UTC first; naive values are taken as UTC.
    Blank values return None. Raises ValueError for anything unparseable.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.lower() in BLANK_VALUES:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Invalid date value: {value}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    return (parsed + IST_OFFSET).replace(microsecond=0)


def format_ist(value: Optional[datetime]) -> Optional[str]:
    """MySQL style 'YYYY-MM-DD HH:MM:SS' rendering, used in log lines"""
    if value is None:
        return None
    return value.strftime("%Y-%m-%d %H:%M:%S")


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip().lower() in BLANK_VALUES


def with_ist_offset(value: datetime) -> datetime:
    """
    Attach the +05:30 offset to a stored IST wall-clock value, so clients
    that send it back unchanged get the same time after `to_ist`.
    """
    if value.tzinfo is not None:
        return value.astimezone(IST)
    return value.replace(tzinfo=IST)
