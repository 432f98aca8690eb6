"""
Parser for GnuPG's machine-readable key listing (--with-colons).
Turns listing text into Key objects; running gpg is left to the caller.
"""

import re
from typing import Iterable, List, Optional, Union

from .config import (
    PRIMARY_RECORDS,
    SUB_KEY_RECORDS,
    RECORD_FINGERPRINT,
    RECORD_USER_ID,
    PRIMARY_RECORD_MIN_FIELDS,
)
from .errors import KeyParseError
from .key.identity import Identity, parse_user_id
from .key.keylist import KeyList
from .key.model import Capabilities, Key
from .logger import get_logger
from .utils.time import parse_listing_timestamp


log = get_logger("keytrust.colons")

_ESCAPE_PATTERN = re.compile(r"\\x([0-9a-fA-F]{2})")


class _KeyBuilder:
    """
    Accumulates the records belonging to one primary key.
    """
    
    def __init__(self, fields: List[str], line_number: int):
        try:
            key_length = int(fields[2]) if fields[2] else 0
        except ValueError:
            raise KeyParseError(f"Invalid key length: {fields[2]!r}", line_number)
        
        self.key_type = fields[0]
        self.key_length = key_length
        self.validity = fields[1]
        self.creation_date = _timestamp(fields[5], line_number)
        self.expiration_date = _timestamp(fields[6], line_number)
        self.owner_trust = fields[8]
        self.capabilities = Capabilities.from_letters(fields[11])
        self.fingerprint = ""
        self.identities = {}
        self.sub_keys = set()
    
    def is_complete(self) -> bool:
        return bool(self.fingerprint) and self.key_length > 0
    
    def build(self) -> Key:
        return Key(
            key_type=self.key_type,
            key_length=self.key_length,
            validity=self.validity,
            creation_date=self.creation_date,
            expiration_date=self.expiration_date,
            owner_trust=self.owner_trust,
            fingerprint=self.fingerprint,
            identities=dict(self.identities),
            sub_keys=frozenset(self.sub_keys),
            capabilities=self.capabilities,
        )


def parse_colons(data: Union[str, Iterable[str]]) -> KeyList:
    """
    Parse a colon-delimited key listing.
    
    Records understood:
    - pub/sec: start a new primary key
    - fpr: fingerprint of the preceding primary key (sub-key
      fingerprints that follow are ignored)
    - uid: user id of the current key
    - sub/ssb: sub-key id of the current key
    
    Other records are skipped. Keys without a fingerprint or key
    length are dropped.
    
    Args:
        data: Listing text or an iterable of lines
        
    Returns:
        KeyList in listing order
        
    Raises:
        KeyParseError: If a primary key record is malformed
    """
    if isinstance(data, str):
        data = data.splitlines()
    
    keys = KeyList()
    current: Optional[_KeyBuilder] = None
    
    for line_number, line in enumerate(data, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        
        fields = line.split(":")
        record = fields[0]
        
        if record in PRIMARY_RECORDS:
            if len(fields) < PRIMARY_RECORD_MIN_FIELDS:
                raise KeyParseError(
                    f"{record} record has {len(fields)} fields, "
                    f"expected at least {PRIMARY_RECORD_MIN_FIELDS}",
                    line_number,
                )
            _flush(current, keys)
            current = _KeyBuilder(fields, line_number)
            continue
        
        if current is None:
            log.debug(f"Skipping {record!r} record outside a key on line {line_number}")
            continue
        
        if record == RECORD_FINGERPRINT:
            if not current.fingerprint and len(fields) > 9:
                current.fingerprint = fields[9]
        
        elif record == RECORD_USER_ID:
            if len(fields) > 9:
                user_id = _unescape(fields[9])
                current.identities[user_id] = _identity(user_id, fields, line_number)
        
        elif record in SUB_KEY_RECORDS:
            if len(fields) > 4 and fields[4]:
                current.sub_keys.add(fields[4])
        
        else:
            log.debug(f"Skipping {record!r} record on line {line_number}")
    
    _flush(current, keys)
    return keys


def _flush(current: Optional[_KeyBuilder], keys: KeyList):
    if current is None:
        return
    if not current.is_complete():
        log.debug(f"Dropping incomplete {current.key_type} key")
        return
    key = current.build()
    log.debug(f"Parsed key {key.fingerprint}")
    keys.append(key)


def _identity(user_id: str, fields: List[str], line_number: int) -> Identity:
    creation_date = _timestamp(fields[5], line_number) if len(fields) > 5 else None
    expiration_date = _timestamp(fields[6], line_number) if len(fields) > 6 else None
    return parse_user_id(user_id, creation_date, expiration_date)


def _timestamp(field: str, line_number: int):
    try:
        return parse_listing_timestamp(field)
    except ValueError as e:
        raise KeyParseError(str(e), line_number)


def _unescape(value: str) -> str:
    """Decode the \\xHH escapes gpg uses for colons and control characters."""
    return _ESCAPE_PATTERN.sub(lambda m: chr(int(m.group(1), 16)), value)
