"""
Infrastructure implementation of the domain zone database interface.

Two backends are available: the standard library's zoneinfo (default, fed by
the system database or the ``tzdata`` package) and pytz, which ships its own
copy of the IANA database. Both produce ``tzinfo`` objects whose offsets are
evaluated at the instant being converted, so daylight saving rules apply to
the stored instant rather than to the current time.
"""

from datetime import tzinfo
from functools import lru_cache
from importlib import metadata
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytz

SUPPORTED_BACKENDS = ("zoneinfo", "pytz")


class ZoneInfoDatabase:
    """
    IANA time zone database adapter.

    Features:
    - Selectable backend (zoneinfo preferred, pytz on request)
    - Uniform ValueError for unknown or malformed identifiers
    - Canonical names as reported by the backend
    """

    def __init__(self, backend: str = "zoneinfo") -> None:
        """
        Initialize the zone database.

        Args:
            backend: ``zoneinfo`` or ``pytz``

        Raises:
            ValueError: If the backend is not supported
        """
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported timezone backend: {backend}. Expected one of {SUPPORTED_BACKENDS}"
            )
        self._backend = backend

    @property
    def backend(self) -> str:
        return self._backend

    @property
    def version(self) -> str:
        """Backend name and the release of the database it reads."""
        if self._backend == "pytz":
            return f"pytz {pytz.OLSON_VERSION}"
        return f"zoneinfo tzdata {_tzdata_version()}"

    def resolve(self, identifier: str) -> tuple[str, tzinfo]:
        """Resolve an identifier to its canonical name and rule set."""
        try:
            tz: Any | tzinfo
            if self._backend == "pytz":
                tz = pytz.timezone(identifier)
                name = tz.zone
            else:
                tz = ZoneInfo(identifier)
                name = tz.key
        except (pytz.UnknownTimeZoneError, ZoneInfoNotFoundError) as e:
            raise ValueError(f"Unknown timezone name: {identifier}") from e
        except (ValueError, OSError) as e:
            # zoneinfo rejects absolute paths and directory names this way
            raise ValueError(f"Invalid timezone name: {identifier}") from e

        return name, tz


@lru_cache(maxsize=1)
def _tzdata_version() -> str:
    try:
        return metadata.version("tzdata")
    except metadata.PackageNotFoundError:
        return "system"
