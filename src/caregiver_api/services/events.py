"""Care event persistence."""

from dataclasses import dataclass
from typing import Protocol

from caregiver_api.domain.events import EventEntry


class EventRepository(Protocol):
    """Persistence interface for care events."""

    def add_event(self, event: EventEntry) -> None:
        """Store an event entry."""

    def get_events(self, receiver_id: str) -> list[EventEntry]:
        """Return every event recorded for a receiver."""

    def delete_event(self, receiver_id: str, event_id: str) -> None:
        """Delete one event of a receiver."""


@dataclass
class EventService:
    """Service for recording and reading care events."""

    repository: EventRepository

    def add_event(self, event: EventEntry) -> None:
        """Persist a validated event entry."""
        self.repository.add_event(event)

    def list_events(self, receiver_id: str) -> list[EventEntry]:
        """Return the events of a receiver."""
        return self.repository.get_events(receiver_id)

    def delete_event(self, receiver_id: str, event_id: str) -> None:
        """Delete an event of a receiver."""
        self.repository.delete_event(receiver_id, event_id)
