"""
Data access layer for the journal.
"""
from .storage import Storage

__all__ = [
    'Storage',
]
