"""
Zone Conversion Service - translation between civil time strings and instants.

Parses RFC 3339 timestamps carrying an explicit UTC offset into absolute
instants, validates time zone identifiers against the zone database, and
renders stored instants as RFC 3339 strings in a caller-chosen zone.

All operations are stateless; a failed parse or zone lookup never touches
the timestamp store.
"""

# Standard library imports
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

# Local imports
from ..exceptions import TimestampParseError, TimezoneResolutionError
from ..interfaces.time_service import IZoneDatabase
from ..value_objects.instant import Instant
from ..value_objects.zone import ResolvedZone

_RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)

# Same shape without the offset, used to tell "missing offset" apart from garbage
_LOCAL_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?",
    re.ASCII,
)

_ENCODED_SEPARATORS = ("%2F", "%2f")

# No zone offset reaches a full day, so instants inside this window render
# in every zone without leaving the datetime range
_EARLIEST = datetime.min.replace(tzinfo=UTC) + timedelta(days=1)
_LATEST = datetime.max.replace(tzinfo=UTC) - timedelta(days=1)


def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as ``+HH:MM``, rounding to the nearest minute."""
    total_minutes = round(offset.total_seconds() / 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True)
class ParsedTimestamp:
    """Result of parsing a civil time string.

    The offset is what the client submitted. It is informational only and is
    not kept once the instant has been stored.
    """

    instant: Instant
    utc_offset: timedelta

    @property
    def offset_label(self) -> str:
        return format_offset(self.utc_offset)


class ZoneConversionService:
    """
    Bidirectional translation between wire-format civil time and instants.

    Args:
        zone_database: Collaborator used to resolve zone identifiers
    """

    def __init__(self, zone_database: IZoneDatabase) -> None:
        self._zone_database = zone_database

    @property
    def zone_database(self) -> IZoneDatabase:
        return self._zone_database

    def parse(self, value: str) -> Instant:
        """Parse an RFC 3339 timestamp into an absolute instant."""
        return self.parse_with_offset(value).instant

    def parse_with_offset(self, value: str) -> ParsedTimestamp:
        """
        Parse an RFC 3339 timestamp, keeping the submitted offset.

        Args:
            value: Timestamp such as ``2023-05-17T17:50:34+02:00``

        Returns:
            The absolute instant and the offset it was submitted with

        Raises:
            TimestampParseError: If the string is malformed, lacks an offset
                or carries invalid calendar or clock fields
        """
        match = _RFC3339_PATTERN.fullmatch(value)
        if match is None:
            if _LOCAL_PATTERN.fullmatch(value):
                raise TimestampParseError(value, "timestamp has no UTC offset")
            if not value:
                raise TimestampParseError(value, "timestamp is empty")
            raise TimestampParseError(value, "input is not an RFC 3339 timestamp")

        offset = self._parse_offset(value, match.group("offset"))

        # A leap second is held as second 59 plus a flag
        second = int(match.group("second"))
        leap_second = second == 60
        if leap_second:
            second = 59

        # Nanosecond precision; further digits are truncated
        digits = (match.group("fraction") or "")[:9].ljust(9, "0")
        microsecond, nanosecond = int(digits[:6]), int(digits[6:])

        try:
            civil = datetime(
                int(match.group("year")),
                int(match.group("month")),
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                second,
                microsecond,
                tzinfo=timezone(offset),
            )
        except ValueError as e:
            raise TimestampParseError(value, str(e)) from e

        try:
            instant = Instant(civil, nanosecond=nanosecond, leap_second=leap_second)
        except OverflowError as e:
            raise TimestampParseError(
                value, "timestamp is out of range once normalized to UTC"
            ) from e

        if not _EARLIEST <= instant.value <= _LATEST:
            raise TimestampParseError(
                value,
                f"timestamp is out of range, UTC value must lie between "
                f"{_EARLIEST.isoformat()} and {_LATEST.isoformat()}",
            )

        return ParsedTimestamp(instant=instant, utc_offset=offset)

    def _parse_offset(self, value: str, raw: str) -> timedelta:
        if raw in ("Z", "z"):
            return timedelta(0)

        hours, minutes = int(raw[1:3]), int(raw[4:6])
        if hours > 23 or minutes > 59:
            raise TimestampParseError(value, f"UTC offset {raw} is out of range")

        offset = timedelta(hours=hours, minutes=minutes)
        return -offset if raw[0] == "-" else offset

    def validate_zone(self, identifier: str) -> ResolvedZone:
        """
        Resolve a zone identifier taken from a request path.

        Percent-encoded separators are decoded first, so ``Africa%2FAlgiers``
        and ``Africa/Algiers`` resolve to the same zone.

        Raises:
            TimezoneResolutionError: If the identifier is empty or unknown
        """
        name = identifier
        for encoded in _ENCODED_SEPARATORS:
            name = name.replace(encoded, "/")

        if not name:
            raise TimezoneResolutionError(identifier, "empty identifier")

        try:
            canonical, rules = self._zone_database.resolve(name)
        except ValueError as e:
            raise TimezoneResolutionError(name) from e

        return ResolvedZone(name=canonical, tzinfo=rules)

    def render(self, instant: Instant, zone: ResolvedZone) -> str:
        """
        Render an instant as an RFC 3339 string in the given zone.

        The offset is the one the zone's rules give for that instant, DST
        included. Historic offsets with a seconds component are rounded to
        the minute and the wall clock is shifted to match, so the rendered
        string still denotes exactly the same instant.

        Fractions use 3, 6 or 9 digits, whichever is the shortest exact
        form. Leap seconds render as second 60.
        """
        local = instant.in_zone(zone.tzinfo)
        offset = local.utcoffset() or timedelta(0)

        if offset % timedelta(minutes=1):
            rounded = timedelta(minutes=round(offset.total_seconds() / 60))
            local = instant.in_zone(timezone(rounded))
            offset = rounded

        second = 60 if instant.leap_second else local.second
        text = (
            f"{local.year:04d}-{local.month:02d}-{local.day:02d}"
            f"T{local.hour:02d}:{local.minute:02d}:{second:02d}"
        )

        nanos = local.microsecond * 1000 + instant.nanosecond
        if nanos:
            if nanos % 1_000_000 == 0:
                text += f".{nanos // 1_000_000:03d}"
            elif nanos % 1000 == 0:
                text += f".{nanos // 1000:06d}"
            else:
                text += f".{nanos:09d}"

        return text + format_offset(offset)

    def render_all(self, instants: Sequence[Instant], zone: ResolvedZone) -> list[str]:
        """Render a sequence of instants, preserving order."""
        return [self.render(instant, zone) for instant in instants]
