"""Value objects for the timestamp domain."""

from .instant import Instant
from .zone import ResolvedZone

__all__ = ["Instant", "ResolvedZone"]
