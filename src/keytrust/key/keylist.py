"""
Collections of keys as returned by a key listing.
"""

from datetime import datetime
from typing import List, Optional

from ..config import SHORT_ID_PREFIX
from ..errors import KeyNotFoundError
from ..logger import get_logger
from .evaluator import is_usable
from .model import Key


log = get_logger("keytrust.keylist")


class KeyList(list):
    """
    Ordered list of keys with recipient helpers.
    """
    
    def usable_keys(self, always_trust: bool = False, now: Optional[datetime] = None) -> 'KeyList':
        """
        Keys usable as encryption recipients, in listing order.
        
        Args:
            always_trust: Skip validity checks
            now: Reference instant (defaults to the wall clock)
            
        Returns:
            KeyList of usable keys
        """
        return KeyList(k for k in self if is_usable(k, always_trust, now=now))
    
    def unusable_keys(self, always_trust: bool = False, now: Optional[datetime] = None) -> 'KeyList':
        """
        Keys that are not usable as encryption recipients, in listing order.
        
        Args:
            always_trust: Skip validity checks
            now: Reference instant (defaults to the wall clock)
            
        Returns:
            KeyList of unusable keys
        """
        return KeyList(k for k in self if not is_usable(k, always_trust, now=now))
    
    def recipients(self) -> List[str]:
        """Sorted fingerprints of all keys."""
        return sorted(k.fingerprint for k in self)
    
    def find_key(self, needle: str) -> Key:
        """
        Find a key by fingerprint, short id, identity or sub-key id.
        
        A key matches when its fingerprint equals or ends with the
        needle, when one of its identities has the needle as name or
        email, or when one of its sub-key ids ends with the needle.
        
        Args:
            needle: Fingerprint, key id (optionally 0x-prefixed), name or email
            
        Returns:
            First matching Key
            
        Raises:
            KeyNotFoundError: If no key matches
        """
        if needle.startswith(SHORT_ID_PREFIX):
            needle = needle[len(SHORT_ID_PREFIX):]
        
        if needle:
            for key in self:
                if key.fingerprint and key.fingerprint.endswith(needle):
                    return key
                
                for identity in key.identities.values():
                    if needle in (identity.name, identity.email):
                        return key
                
                for sub_key in key.sub_keys:
                    if sub_key.endswith(needle):
                        return key
        
        log.debug(f"No key matching {needle!r} among {len(self)} keys")
        raise KeyNotFoundError(f"No matching key found for {needle!r}")
