"""Supabase-backed receiver repository."""

from dataclasses import dataclass

from supabase import Client

from caregiver_api.domain.errors import ItemNotFoundError
from caregiver_api.domain.models import ReceiverRecord
from caregiver_api.services.receivers import ReceiverRepository


@dataclass
class SupabaseReceiverRepository(ReceiverRepository):
    """Supabase implementation for receivers."""

    client: Client
    table: str

    def create_receiver(self, receiver: ReceiverRecord) -> None:
        """Insert a receiver row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "receiver_id": receiver.receiver_id,
                    "first_name": receiver.first_name,
                    "last_name": receiver.last_name,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create receiver in Supabase")

    def get_receiver(self, receiver_id: str) -> ReceiverRecord:
        """Return the receiver row for an id."""
        response = (
            self.client.table(self.table)
            .select("receiver_id, first_name, last_name")
            .eq("receiver_id", receiver_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise ItemNotFoundError(self.table, {"receiver_id": receiver_id})
        row = response.data[0]
        return ReceiverRecord(
            receiver_id=row["receiver_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
        )

    def delete_receiver(self, receiver_id: str) -> None:
        """Delete a receiver row."""
        self.client.table(self.table).delete().eq(
            "receiver_id", receiver_id
        ).execute()
