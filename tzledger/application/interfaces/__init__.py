"""Interfaces the application layer expects infrastructure to provide."""

from .repositories import ITimestampRepository

__all__ = ["ITimestampRepository"]
