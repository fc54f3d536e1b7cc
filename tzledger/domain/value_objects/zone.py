"""Resolved time zone value object."""

from dataclasses import dataclass
from datetime import tzinfo


@dataclass(frozen=True)
class ResolvedZone:
    """A time zone identifier that the zone database has accepted.

    Attributes:
        name: Canonical identifier, e.g. ``Europe/Madrid``
        tzinfo: Rule set used to compute the offset at any instant
    """

    name: str
    tzinfo: tzinfo

    def __str__(self) -> str:
        return self.name
