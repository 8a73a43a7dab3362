"""Supabase-backed care event repository."""

from dataclasses import dataclass

from supabase import Client

from caregiver_api.domain.events import EventEntry, EventKind
from caregiver_api.services.events import EventRepository


@dataclass
class SupabaseEventRepository(EventRepository):
    """Supabase implementation for care events."""

    client: Client
    table: str

    def add_event(self, event: EventEntry) -> None:
        """Insert an event row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "event_id": event.event_id,
                    "receiver_id": event.receiver_id,
                    "user_id": event.user_id,
                    "type": event.kind.value,
                    "timestamp": event.timestamp,
                    "data": event.data,
                    "note": event.note,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create event in Supabase")

    def get_events(self, receiver_id: str) -> list[EventEntry]:
        """Return every event row of a receiver."""
        response = (
            self.client.table(self.table)
            .select("event_id, receiver_id, user_id, type, timestamp, data, note")
            .eq("receiver_id", receiver_id)
            .execute()
        )
        return [
            EventEntry(
                event_id=row["event_id"],
                receiver_id=row["receiver_id"],
                user_id=row["user_id"],
                kind=EventKind(row["type"]),
                timestamp=row["timestamp"],
                data=row.get("data") or {},
                note=row.get("note"),
            )
            for row in response.data or []
        ]

    def delete_event(self, receiver_id: str, event_id: str) -> None:
        """Delete the event row keyed by receiver and event id."""
        self.client.table(self.table).delete().eq("receiver_id", receiver_id).eq(
            "event_id", event_id
        ).execute()
