"""
Repository Interface Definitions

Defines the contract of the timestamp store that infrastructure must
implement. The store is append-only: there is no update, delete or query.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol

# Local imports
from tzledger.domain.value_objects.instant import Instant


class ITimestampRepository(Protocol):
    """
    Timestamp store interface.

    Holds the ordered sequence of stored instants. Concurrent appends must
    never be lost, and every snapshot must reflect some sequence of completed
    appends, never a partially applied one.
    """

    @abstractmethod
    def append(self, instant: Instant) -> None:
        """
        Add an instant to the end of the sequence.

        Args:
            instant: The instant to store; already validated upstream
        """
        ...

    @abstractmethod
    def snapshot(self) -> tuple[Instant, ...]:
        """
        Return a copy of all stored instants in insertion order.

        Returns:
            Immutable copy unaffected by later appends
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored instants."""
        ...
