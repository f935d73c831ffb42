"""Profile store port."""

from typing import Protocol

REGISTRATION_KEY = "userRegistration"
LINKED_STATION_KEY = "linkedPoliceStation"


class ProfileStore(Protocol):
    """Durable key-value storage for serialized profile records."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> None:
        """Remove a value; missing keys are ignored."""
        ...
