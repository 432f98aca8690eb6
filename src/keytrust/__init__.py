"""
keytrust - Key Trust Evaluator

Decides whether a key reported by GnuPG is usable for encryption
and derives stable identifiers from its fingerprint and identities.

Main exports:
- Key: Key snapshot with capability flags
- Identity: User id attached to a key
- KeyList: Key collection with recipient helpers
- parse_colons: Parser for `gpg --with-colons` listings
"""

from .key import (
    Identity,
    Capabilities,
    Key,
    KeyList,
    is_usable,
    primary_identity,
    short_id,
    one_line_summary,
    full_summary,
)
from .colons import parse_colons
from .errors import *

__version__ = "0.1.0"

__all__ = [
    'Identity',
    'Capabilities',
    'Key',
    'KeyList',
    'parse_colons',
    'is_usable',
    'primary_identity',
    'short_id',
    'one_line_summary',
    'full_summary',
]
