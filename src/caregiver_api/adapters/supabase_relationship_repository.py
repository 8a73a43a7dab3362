"""Supabase-backed relationship repository."""

from dataclasses import dataclass
from typing import Any

from supabase import Client

from caregiver_api.domain.errors import ItemNotFoundError
from caregiver_api.domain.models import RelationshipRecord
from caregiver_api.services.relationships import RelationshipRepository

_COLUMNS = "user_id, receiver_id, primary_care_giver, email_notifications"


@dataclass
class SupabaseRelationshipRepository(RelationshipRepository):
    """Supabase implementation for caregiver relationships."""

    client: Client
    table: str

    def add_relationship(self, relationship: RelationshipRecord) -> None:
        """Insert a relationship row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": relationship.user_id,
                    "receiver_id": relationship.receiver_id,
                    "primary_care_giver": relationship.primary_care_giver,
                    "email_notifications": relationship.email_notifications,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create relationship in Supabase")

    def get_relationship(self, user_id: str, receiver_id: str) -> RelationshipRecord:
        """Return the relationship row keyed by user and receiver."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("receiver_id", receiver_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise ItemNotFoundError(
                self.table, {"user_id": user_id, "receiver_id": receiver_id}
            )
        return _to_record(response.data[0])

    def get_relationships_by_user(self, user_id: str) -> list[RelationshipRecord]:
        """Return every relationship row of a user."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .execute()
        )
        return [_to_record(row) for row in response.data or []]

    def delete_relationship(self, user_id: str, receiver_id: str) -> None:
        """Delete the relationship row keyed by user and receiver."""
        self.client.table(self.table).delete().eq("user_id", user_id).eq(
            "receiver_id", receiver_id
        ).execute()


def _to_record(row: dict[str, Any]) -> RelationshipRecord:
    return RelationshipRecord(
        user_id=row["user_id"],
        receiver_id=row["receiver_id"],
        primary_care_giver=bool(row["primary_care_giver"]),
        email_notifications=bool(row.get("email_notifications", True)),
    )
