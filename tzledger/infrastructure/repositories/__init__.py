"""
Repository Infrastructure Module

Concrete in-memory implementation of the timestamp store.
"""

from .memory_timestamp_repository import InMemoryTimestampRepository

__all__ = ["InMemoryTimestampRepository"]
