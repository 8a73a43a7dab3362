"""Caregiver to receiver relationships."""

from dataclasses import dataclass
from typing import Protocol

from caregiver_api.domain.models import RelationshipRecord


class RelationshipRepository(Protocol):
    """Persistence interface for relationships."""

    def add_relationship(self, relationship: RelationshipRecord) -> None:
        """Store a relationship."""

    def get_relationship(self, user_id: str, receiver_id: str) -> RelationshipRecord:
        """Return one relationship or raise ItemNotFoundError."""

    def get_relationships_by_user(self, user_id: str) -> list[RelationshipRecord]:
        """Return every relationship of a user."""

    def delete_relationship(self, user_id: str, receiver_id: str) -> None:
        """Remove the relationship keyed by user and receiver."""


@dataclass
class RelationshipService:
    """Service for linking caregivers to receivers."""

    repository: RelationshipRepository

    def list_for_user(self, user_id: str) -> list[RelationshipRecord]:
        """Return the relationships a user holds."""
        return self.repository.get_relationships_by_user(user_id)

    def get_relationship(self, user_id: str, receiver_id: str) -> RelationshipRecord:
        return self.repository.get_relationship(user_id, receiver_id)

    def add_primary_caregiver(self, user_id: str, receiver_id: str) -> None:
        """Link the caregiver who registered the receiver."""
        self.repository.add_relationship(
            RelationshipRecord(
                user_id=user_id, receiver_id=receiver_id, primary_care_giver=True
            )
        )

    def add_additional_caregiver(self, user_id: str, receiver_id: str) -> None:
        """Link an invited caregiver."""
        self.repository.add_relationship(
            RelationshipRecord(
                user_id=user_id, receiver_id=receiver_id, primary_care_giver=False
            )
        )

    def remove_caregiver(self, user_id: str, receiver_id: str) -> None:
        """Unlink a caregiver from a receiver."""
        self.repository.delete_relationship(user_id, receiver_id)
