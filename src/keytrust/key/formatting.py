"""
Human-readable key identifiers.
Formatting never fails: invalid data degrades to sentinel strings.
"""

from ..config import (
    FINGERPRINT_MIN_LENGTH,
    SHORT_ID_LENGTH,
    SHORT_ID_PREFIX,
    INVALID_KEY_FORMAT,
    FINGERPRINT_LINE_PREFIX,
)
from ..utils.time import format_date
from .evaluator import ordered_identities, primary_identity
from .model import Key


def has_valid_fingerprint(key: Key) -> bool:
    """
    Check the fingerprint is long enough to derive a short id from.
    
    Args:
        key: Key to check
        
    Returns:
        True if the fingerprint has at least FINGERPRINT_MIN_LENGTH characters
    """
    return len(key.fingerprint) >= FINGERPRINT_MIN_LENGTH


def short_fingerprint(key: Key) -> str:
    """Last SHORT_ID_LENGTH characters of the fingerprint, "" if invalid."""
    if not has_valid_fingerprint(key):
        return ""
    return key.fingerprint[-SHORT_ID_LENGTH:]


def short_id(key: Key) -> str:
    """
    Get the conventional short id of a key.
    
    Args:
        key: Key to format
        
    Returns:
        "0x" followed by the last 16 fingerprint characters, or an
        empty string if the fingerprint is invalid
    """
    if not has_valid_fingerprint(key):
        return ""
    return SHORT_ID_PREFIX + short_fingerprint(key)


def one_line_summary(key: Key) -> str:
    """
    Summarize a key on one line with its primary identity only.
    
    Args:
        key: Key to format
        
    Returns:
        "0x<short id> - <identity>", or "(invalid:<fingerprint>)"
    """
    if not has_valid_fingerprint(key):
        return INVALID_KEY_FORMAT.format(fingerprint=key.fingerprint)
    return f"{short_id(key)} - {primary_identity(key).display_id()}"


def full_summary(key: Key) -> str:
    """
    Render a multi-line description close to GnuPG's own key listing.
    
    Identities are listed newest first.
    
    Args:
        key: Key to format
        
    Returns:
        Multi-line string
    """
    out = (
        f"{key.key_type}   {key.key_length}D/{SHORT_ID_PREFIX}{short_fingerprint(key)} "
        f"{format_date(key.creation_date)}"
    )
    if key.expiration_date is not None:
        out += f" [expires: {format_date(key.expiration_date)}]"
    
    lines = [out, FINGERPRINT_LINE_PREFIX + key.fingerprint]
    for identity in ordered_identities(key):
        lines.append(str(identity))
    
    return "\n".join(lines)
