"""
Infrastructure layer concurrency utilities.

This module contains the locking primitives used to share state between
request handlers, keeping the domain and application layers free of them.
"""

from .rw_lock import ReadWriteLock

__all__ = ["ReadWriteLock"]
