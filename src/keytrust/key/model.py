"""
Key model.
A Key is an immutable snapshot of what the key-management tool reported.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, FrozenSet, Optional

from ..config import (
    CAP_ENCRYPT,
    CAP_SIGN,
    CAP_CERTIFY,
    CAP_AUTHENTICATION,
    CAP_DEACTIVATED,
)
from ..utils.time import format_date
from .identity import Identity


@dataclass(frozen=True)
class Capabilities:
    """
    Capability flags of a key.
    """
    encrypt: bool = False
    sign: bool = False
    certify: bool = False
    authentication: bool = False
    deactivated: bool = False
    
    @classmethod
    def from_letters(cls, letters: str) -> 'Capabilities':
        """
        Build capabilities from a listing's capability field.
        
        Only uppercase letters count: they describe what the key as a
        whole (primary plus sub-keys) can be used for.
        
        Args:
            letters: Capability field, e.g. "scESC"
            
        Returns:
            Capabilities object
        """
        return cls(
            encrypt=CAP_ENCRYPT in letters,
            sign=CAP_SIGN in letters,
            certify=CAP_CERTIFY in letters,
            authentication=CAP_AUTHENTICATION in letters,
            deactivated=CAP_DEACTIVATED in letters,
        )


@dataclass(frozen=True)
class Key:
    """
    A public or secret key as reported by the key-management tool.
    
    Dates are UTC datetimes; None means unset, so a key with
    expiration_date=None never expires.
    """
    key_type: str = ""
    key_length: int = 0
    validity: str = ""
    creation_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    owner_trust: str = ""
    fingerprint: str = ""
    identities: Dict[str, Identity] = field(default_factory=dict, hash=False)
    sub_keys: FrozenSet[str] = frozenset()
    capabilities: Capabilities = field(default_factory=Capabilities)
    
    def is_usable(self, always_trust: bool = False, now: Optional[datetime] = None) -> bool:
        """Check if the key can be used as an encryption recipient."""
        from .evaluator import is_usable
        return is_usable(self, always_trust, now=now)
    
    def primary_identity(self) -> Identity:
        """Get the most recently created identity."""
        from .evaluator import primary_identity
        return primary_identity(self)
    
    def short_id(self) -> str:
        """Get the 0x-prefixed short fingerprint, or "" if invalid."""
        from .formatting import short_id
        return short_id(self)
    
    def one_line(self) -> str:
        """Get a one-line summary with the primary identity."""
        from .formatting import one_line_summary
        return one_line_summary(self)
    
    def __str__(self) -> str:
        from .formatting import full_summary
        return full_summary(self)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert key to dictionary."""
        return {
            'key_type': self.key_type,
            'key_length': self.key_length,
            'validity': self.validity,
            'creation_date': format_date(self.creation_date),
            'expiration_date': format_date(self.expiration_date),
            'owner_trust': self.owner_trust,
            'fingerprint': self.fingerprint,
            'identities': {uid: ident.to_dict() for uid, ident in self.identities.items()},
            'sub_keys': sorted(self.sub_keys),
            'capabilities': {
                'encrypt': self.capabilities.encrypt,
                'sign': self.capabilities.sign,
                'certify': self.capabilities.certify,
                'authentication': self.capabilities.authentication,
                'deactivated': self.capabilities.deactivated,
            },
        }
