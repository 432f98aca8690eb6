"""
Domain-specific exceptions for keytrust.
Evaluation never raises; these cover parsing and lookups.
"""

from typing import Optional


class KeyTrustError(Exception):
    """Base exception for all keytrust errors."""
    pass


class KeyParseError(KeyTrustError):
    """Raised when a key listing record is malformed."""
    
    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class KeyNotFoundError(KeyTrustError):
    """Raised when no key matches a lookup."""
    pass
