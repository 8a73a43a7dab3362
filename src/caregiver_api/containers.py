"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from caregiver_api.adapters.supabase_event_repository import SupabaseEventRepository
from caregiver_api.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from caregiver_api.adapters.supabase_receiver_repository import (
    SupabaseReceiverRepository,
)
from caregiver_api.adapters.supabase_relationship_repository import (
    SupabaseRelationshipRepository,
)
from caregiver_api.adapters.supabase_user_repository import SupabaseUserRepository
from caregiver_api.config import Settings
from caregiver_api.services.events import EventService
from caregiver_api.services.feedback import FeedbackService
from caregiver_api.services.receivers import ReceiverService
from caregiver_api.services.relationships import RelationshipService
from caregiver_api.services.users import UserService


@dataclass(frozen=True)
class AppContainer:
    """Holds the dependencies every request handler receives."""

    settings: Settings
    user_service: UserService
    receiver_service: ReceiverService
    relationship_service: RelationshipService
    event_service: EventService
    feedback_service: FeedbackService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    relationship_service = RelationshipService(
        SupabaseRelationshipRepository(
            supabase_client, resolved_settings.relationship_table_name
        )
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(
            SupabaseUserRepository(supabase_client, resolved_settings.user_table_name)
        ),
        receiver_service=ReceiverService(
            repository=SupabaseReceiverRepository(
                supabase_client, resolved_settings.receiver_table_name
            ),
            relationship_service=relationship_service,
        ),
        relationship_service=relationship_service,
        event_service=EventService(
            SupabaseEventRepository(
                supabase_client, resolved_settings.event_table_name
            )
        ),
        feedback_service=FeedbackService(
            repository=SupabaseNotificationRepository(
                supabase_client, resolved_settings.notification_table_name
            ),
            feedback_email=resolved_settings.feedback_email,
        ),
    )
