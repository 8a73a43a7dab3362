"""Supabase notification outbox."""

from dataclasses import dataclass

from supabase import Client

from caregiver_api.services.feedback import NotificationRepository


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Writes notifications to an outbox table for the delivery worker."""

    client: Client
    table: str

    def enqueue(
        self,
        notification_type: str,
        channel: list[str],
        execution_data: dict[str, object],
    ) -> None:
        """Insert a pending notification row."""
        self.client.table(self.table).insert(
            {
                "notification_type": notification_type,
                "channel": channel,
                "execution_data": execution_data,
            }
        ).execute()
