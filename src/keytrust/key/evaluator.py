"""
Deterministic key trust evaluation.
All evaluation is pure and side-effect free.
"""

from datetime import datetime, timezone
from typing import List, Optional

from ..config import TRUSTED_VALIDITIES
from ..utils.time import as_aware, is_expired
from ..utils.time import now as utc_now
from .identity import Identity
from .model import Key


# Identities without a creation date sort as the oldest
_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def is_usable(key: Key, always_trust: bool = False, now: Optional[datetime] = None) -> bool:
    """
    Decide whether the key is usable as an encryption recipient.
    
    Evaluation logic:
    1. Deactivated keys are never usable
    2. Keys without the encryption capability are never usable
    3. Keys that expired before `now` are never usable
    4. With always_trust the validity code is not consulted
    5. Otherwise the validity must be marginal, full or ultimate
    
    The result depends on the current time through step 3, so callers
    that need a repeatable answer pass `now` explicitly.
    
    Args:
        key: Key to evaluate
        always_trust: Skip the validity check
        now: Reference instant (defaults to the wall clock)
        
    Returns:
        True if the key is usable
    """
    if key.capabilities.deactivated:
        return False
    
    if not key.capabilities.encrypt:
        return False
    
    if now is None:
        now = utc_now()
    if is_expired(key.expiration_date, now):
        return False
    
    if always_trust:
        return True
    
    return key.validity in TRUSTED_VALIDITIES


def ordered_identities(key: Key) -> List[Identity]:
    """
    List the key's identities, newest first.
    
    Identities created at the same instant are ordered by their
    user id string.
    
    Args:
        key: Key whose identities to order
        
    Returns:
        List of Identity objects
    """
    entries = sorted(key.identities.items(), key=lambda entry: entry[0])
    entries.sort(key=lambda entry: _creation_sort_key(entry[1]), reverse=True)
    return [identity for _, identity in entries]


def primary_identity(key: Key) -> Identity:
    """
    Select the most recently created identity.
    
    Args:
        key: Key to inspect
        
    Returns:
        Newest Identity, or an empty Identity if the key has none
    """
    identities = ordered_identities(key)
    if not identities:
        return Identity()
    return identities[0]


def _creation_sort_key(identity: Identity) -> datetime:
    if identity.creation_date is None:
        return _UNDATED
    return as_aware(identity.creation_date)
