"""
Infrastructure time services module.

This module provides the concrete time zone database behind the domain's
IZoneDatabase interface, keeping library specifics out of the domain layer.
"""

from .timezone_service import SUPPORTED_BACKENDS, ZoneInfoDatabase

__all__ = ["SUPPORTED_BACKENDS", "ZoneInfoDatabase"]
