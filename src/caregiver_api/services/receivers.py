"""Receiver registration and lookup."""

import logging
from dataclasses import dataclass
from typing import Protocol

from caregiver_api.domain.models import ReceiverRecord, new_receiver
from caregiver_api.services.relationships import RelationshipService

logger = logging.getLogger(__name__)


class ReceiverRepository(Protocol):
    """Persistence interface for receivers."""

    def create_receiver(self, receiver: ReceiverRecord) -> None:
        """Store a new receiver."""

    def get_receiver(self, receiver_id: str) -> ReceiverRecord:
        """Return a receiver or raise ItemNotFoundError."""

    def delete_receiver(self, receiver_id: str) -> None:
        """Remove a receiver."""


@dataclass
class ReceiverService:
    """Service for receivers and their primary caregiver."""

    repository: ReceiverRepository
    relationship_service: RelationshipService

    def register_primary_receiver(
        self, user_id: str, first_name: str, last_name: str
    ) -> ReceiverRecord:
        """Create a receiver and make the user its primary caregiver.

        The two writes are not atomic. When linking fails the new receiver is
        deleted again so that no receiver is left without a caregiver, and the
        original error is re-raised.
        """
        receiver = new_receiver(first_name, last_name)
        self.repository.create_receiver(receiver)
        try:
            self.relationship_service.add_primary_caregiver(
                user_id, receiver.receiver_id
            )
        except Exception:
            logger.warning(
                "Linking receiver %s to user %s failed, removing receiver",
                receiver.receiver_id,
                user_id,
            )
            self._discard(receiver.receiver_id)
            raise
        return receiver

    def get_receiver(self, receiver_id: str) -> ReceiverRecord:
        """Return a stored receiver."""
        return self.repository.get_receiver(receiver_id)

    def _discard(self, receiver_id: str) -> None:
        try:
            self.repository.delete_receiver(receiver_id)
        except Exception:
            logger.exception("Failed to remove orphaned receiver %s", receiver_id)
