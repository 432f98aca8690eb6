"""
User identities attached to a key.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any, Optional

from ..config import UID_LINE_PREFIX
from ..utils.time import format_date


# "Name (Comment) <email>", every part optional
_USER_ID_PATTERN = re.compile(
    r"^(?P<name>[^(<]*?)\s*"
    r"(?:\((?P<comment>[^)]*)\)\s*)?"
    r"(?:<(?P<email>[^>]*)>)?$"
)


@dataclass(frozen=True)
class Identity:
    """
    A user id bound to a key.
    
    The default instance (all fields empty) stands in for a key
    without identities.
    """
    name: str = ""
    comment: str = ""
    email: str = ""
    creation_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    
    def display_id(self) -> str:
        """
        Render the identity as "Name (Comment) <email>".
        Empty parts are left out.
        
        Returns:
            Display string, empty for the default identity
        """
        parts = []
        if self.name:
            parts.append(self.name)
        if self.comment:
            parts.append(f"({self.comment})")
        if self.email:
            parts.append(f"<{self.email}>")
        return " ".join(parts)
    
    def __str__(self) -> str:
        return UID_LINE_PREFIX + self.display_id()
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert identity to dictionary."""
        return {
            'name': self.name,
            'comment': self.comment,
            'email': self.email,
            'creation_date': format_date(self.creation_date),
            'expiration_date': format_date(self.expiration_date),
        }


def parse_user_id(
    user_id: str,
    creation_date: Optional[datetime] = None,
    expiration_date: Optional[datetime] = None,
) -> Identity:
    """
    Split a user id string into its name, comment and email parts.
    
    Strings that do not follow the "Name (Comment) <email>" shape are
    kept whole as the name.
    
    Args:
        user_id: Raw user id
        creation_date: Self-signature creation date
        expiration_date: Self-signature expiration date
        
    Returns:
        Identity object
    """
    user_id = user_id.strip()
    match = _USER_ID_PATTERN.match(user_id)
    
    if match is None:
        return Identity(
            name=user_id,
            creation_date=creation_date,
            expiration_date=expiration_date,
        )
    
    return Identity(
        name=match.group('name') or "",
        comment=match.group('comment') or "",
        email=match.group('email') or "",
        creation_date=creation_date,
        expiration_date=expiration_date,
    )
