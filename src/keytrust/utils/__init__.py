"""Utility modules for keytrust."""

from . import time

__all__ = ['time']
