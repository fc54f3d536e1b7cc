"""
In-memory timestamp repository.

Implements ITimestampRepository on top of a plain list guarded by a
reader/writer lock. Nothing survives a restart.
"""

import logging

from tzledger.domain.value_objects.instant import Instant
from tzledger.infrastructure.concurrency.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryTimestampRepository:
    """
    Append-only, process-lifetime timestamp store.

    Appends take the lock exclusively for the single list append; snapshots
    take it in shared mode just long enough to copy the list.
    """

    def __init__(self, lock: ReadWriteLock | None = None) -> None:
        self._instants: list[Instant] = []
        self._lock = lock or ReadWriteLock()

    def append(self, instant: Instant) -> None:
        """Add an instant to the end of the store."""
        with self._lock.write_locked():
            self._instants.append(instant)
            size = len(self._instants)

        logger.debug(f"Stored instant {instant}", extra={"store_size": size})

    def snapshot(self) -> tuple[Instant, ...]:
        """Return an immutable copy of the store in insertion order."""
        with self._lock.read_locked():
            return tuple(self._instants)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._instants)

    def __len__(self) -> int:
        return self.count()
