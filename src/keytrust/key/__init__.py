"""Key model and evaluation for keytrust."""

from .identity import Identity, parse_user_id
from .model import Capabilities, Key
from .evaluator import is_usable, primary_identity, ordered_identities
from .formatting import short_id, one_line_summary, full_summary, has_valid_fingerprint
from .keylist import KeyList

__all__ = [
    'Identity',
    'parse_user_id',
    'Capabilities',
    'Key',
    'is_usable',
    'primary_identity',
    'ordered_identities',
    'short_id',
    'one_line_summary',
    'full_summary',
    'has_valid_fingerprint',
    'KeyList',
]
