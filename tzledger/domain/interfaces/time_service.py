"""
Domain time zone database interface.

Defines the single operation the domain needs from a time zone database:
turning an identifier into a rule set. Applying the rule set to an instant is
done through the standard ``tzinfo`` protocol, which every backend honours.
"""

from abc import abstractmethod
from datetime import tzinfo
from typing import Protocol, runtime_checkable


@runtime_checkable
class IZoneDatabase(Protocol):
    """
    Time zone database interface.

    Implementations look identifiers up in the IANA database (or an
    equivalent) and return a ``tzinfo`` able to compute the offset in force
    at any given instant.
    """

    @property
    def version(self) -> str:
        """Identifier of the database release or backend in use."""
        ...

    @abstractmethod
    def resolve(self, identifier: str) -> tuple[str, tzinfo]:
        """
        Resolve a zone identifier.

        Args:
            identifier: Zone name such as ``Africa/Algiers`` or ``UTC``

        Returns:
            The canonical zone name and its rule set

        Raises:
            ValueError: If the identifier is unknown or malformed
        """
        ...
