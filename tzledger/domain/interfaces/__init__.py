"""
Domain interfaces for dependency inversion.

The zone database is an external, versioned collaborator. The domain only
depends on the narrow contract defined here; infrastructure supplies the
concrete implementation.
"""

from .time_service import IZoneDatabase

__all__ = ["IZoneDatabase"]
