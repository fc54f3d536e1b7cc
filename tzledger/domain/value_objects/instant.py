"""Instant value object for representing absolute points in time."""

# Standard library imports
from datetime import UTC, datetime, tzinfo


class Instant:
    """Immutable value object representing an absolute point in time.

    The wrapped datetime is always normalized to UTC, so two instants compare
    equal whenever they denote the same moment, whatever offset they were
    created with. Precision below the microsecond is kept as a separate
    nanosecond remainder, and a positive leap second is kept as second 59
    with ``leap_second`` set.
    """

    __slots__ = ("_value", "_nanosecond", "_leap_second")

    def __init__(self, value: datetime, nanosecond: int = 0, leap_second: bool = False) -> None:
        """Initialize Instant from a timezone-aware datetime.

        Args:
            value: Aware datetime in any offset
            nanosecond: Sub-microsecond remainder, 0 to 999
            leap_second: Whether the instant falls inside a leap second

        Raises:
            ValueError: If the datetime is naive, the remainder is out of
                range or a leap second does not fall on second 59
            OverflowError: If normalizing to UTC leaves the datetime range
        """
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("Instant requires a timezone-aware datetime")
        if not 0 <= nanosecond < 1000:
            raise ValueError(f"nanosecond must be in 0..999, got {nanosecond}")

        self._value = value.astimezone(UTC)
        if leap_second and self._value.second != 59:
            raise ValueError("A leap second must fall on second 59 in UTC")

        self._nanosecond = nanosecond
        self._leap_second = leap_second

    @property
    def value(self) -> datetime:
        """The instant as an aware UTC datetime, truncated to microseconds."""
        return self._value

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    @property
    def leap_second(self) -> bool:
        return self._leap_second

    def in_zone(self, zone: tzinfo) -> datetime:
        """Return the civil datetime of this instant in the given zone."""
        return self._value.astimezone(zone)

    def _key(self) -> tuple[datetime, int, bool]:
        return self._value, self._nanosecond, self._leap_second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._value.isoformat()

    def __repr__(self) -> str:
        extras = ""
        if self._nanosecond:
            extras += f", nanosecond={self._nanosecond}"
        if self._leap_second:
            extras += ", leap_second=True"
        return f"Instant({self._value.isoformat()!r}{extras})"
