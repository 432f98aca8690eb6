"""
Time utilities for key dates.
Dates are timezone-aware UTC datetimes; None is the unset value.
"""

from datetime import datetime, timezone
from typing import Optional

from ..config import DATE_FORMAT, COLON_ISO_TIMESTAMP_FORMAT


def now() -> datetime:
    """
    Get the current wall-clock time.
    
    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc)


def as_aware(value: datetime) -> datetime:
    """
    Make a datetime comparable with timezone-aware ones.
    Naive datetimes are taken to be in UTC; aware ones are returned
    unchanged, since converting near the datetime limits can overflow.
    
    Args:
        value: datetime to normalize
        
    Returns:
        Timezone-aware datetime
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_expired(expiration: Optional[datetime], at: datetime) -> bool:
    """
    Check whether an expiration date lies strictly before a given instant.
    An unset expiration never expires.
    
    Args:
        expiration: Expiration date or None
        at: Reference instant
        
    Returns:
        True if expired at the reference instant
    """
    if expiration is None:
        return False
    return as_aware(expiration) < as_aware(at)


def format_date(value: Optional[datetime]) -> str:
    """Format a date as YYYY-MM-DD, or an empty string when unset."""
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


def parse_listing_timestamp(field: str) -> Optional[datetime]:
    """
    Parse a timestamp field from a colon key listing.
    
    GnuPG writes seconds since the epoch, or an ISO 8601 basic
    form (YYYYMMDDTHHMMSS) with --fixed-list-mode off.
    
    Args:
        field: Raw field value
        
    Returns:
        UTC datetime, or None for empty and zero fields
        
    Raises:
        ValueError: If the field is not a timestamp
    """
    field = field.strip()
    if not field or field == "0":
        return None
    
    if "T" in field:
        try:
            parsed = datetime.strptime(field, COLON_ISO_TIMESTAMP_FORMAT)
        except ValueError as e:
            raise ValueError(f"Invalid timestamp format: {e}")
        return parsed.replace(tzinfo=timezone.utc)
    
    try:
        seconds = int(field)
    except ValueError:
        raise ValueError(f"Invalid timestamp: {field!r}")
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {field!r} ({e})")
