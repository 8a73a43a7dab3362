"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from caregiver_api.config import Settings
from caregiver_api.containers import AppContainer
from caregiver_api.domain.errors import ItemNotFoundError
from caregiver_api.domain.events import EventEntry
from caregiver_api.domain.models import ReceiverRecord, RelationshipRecord, UserRecord
from caregiver_api.services.events import EventRepository, EventService
from caregiver_api.services.feedback import FeedbackService, NotificationRepository
from caregiver_api.services.receivers import ReceiverRepository, ReceiverService
from caregiver_api.services.relationships import (
    RelationshipRepository,
    RelationshipService,
)
from caregiver_api.services.users import UserRepository, UserService

CAREGIVER_ID = "User#123"
OUTSIDER_ID = "User#NotACareGiver"
RECEIVER_ID = "Receiver#123"


@dataclass
class FailureInjection:
    """Makes selected repository operations raise like a failing store."""

    fail_on: set[str] = field(default_factory=set)

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise RuntimeError(f"{operation} failed")


@dataclass
class InMemoryUserRepository(FailureInjection, UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def create_user(self, user: UserRecord) -> None:
        self._check("create_user")
        self.users[user.user_id] = user

    def get_user(self, user_id: str) -> UserRecord:
        self._check("get_user")
        if user_id not in self.users:
            raise ItemNotFoundError("users", {"user_id": user_id})
        return self.users[user_id]

    def get_user_by_email(self, email: str) -> UserRecord:
        self._check("get_user_by_email")
        for user in self.users.values():
            if user.email == email:
                return user
        raise ItemNotFoundError("users", {"email": email})


@dataclass
class InMemoryReceiverRepository(FailureInjection, ReceiverRepository):
    """In-memory receiver repository for tests."""

    receivers: dict[str, ReceiverRecord] = field(default_factory=dict)
    deleted: list[str] = field(default_factory=list)

    def create_receiver(self, receiver: ReceiverRecord) -> None:
        self._check("create_receiver")
        self.receivers[receiver.receiver_id] = receiver

    def get_receiver(self, receiver_id: str) -> ReceiverRecord:
        self._check("get_receiver")
        if receiver_id not in self.receivers:
            raise ItemNotFoundError("receivers", {"receiver_id": receiver_id})
        return self.receivers[receiver_id]

    def delete_receiver(self, receiver_id: str) -> None:
        self._check("delete_receiver")
        self.receivers.pop(receiver_id, None)
        self.deleted.append(receiver_id)


@dataclass
class InMemoryRelationshipRepository(FailureInjection, RelationshipRepository):
    """In-memory relationship repository keyed by (user, receiver)."""

    relationships: dict[tuple[str, str], RelationshipRecord] = field(
        default_factory=dict
    )

    def add_relationship(self, relationship: RelationshipRecord) -> None:
        self._check("add_relationship")
        key = (relationship.user_id, relationship.receiver_id)
        self.relationships[key] = relationship

    def get_relationship(self, user_id: str, receiver_id: str) -> RelationshipRecord:
        self._check("get_relationship")
        key = (user_id, receiver_id)
        if key not in self.relationships:
            raise ItemNotFoundError(
                "relationships", {"user_id": user_id, "receiver_id": receiver_id}
            )
        return self.relationships[key]

    def get_relationships_by_user(self, user_id: str) -> list[RelationshipRecord]:
        self._check("get_relationships_by_user")
        return [
            relationship
            for (owner, _), relationship in self.relationships.items()
            if owner == user_id
        ]

    def delete_relationship(self, user_id: str, receiver_id: str) -> None:
        self._check("delete_relationship")
        self.relationships.pop((user_id, receiver_id), None)


@dataclass
class InMemoryEventRepository(FailureInjection, EventRepository):
    """In-memory event repository keyed by (receiver, event)."""

    events: dict[tuple[str, str], EventEntry] = field(default_factory=dict)

    def add_event(self, event: EventEntry) -> None:
        self._check("add_event")
        self.events[(event.receiver_id, event.event_id)] = event

    def get_events(self, receiver_id: str) -> list[EventEntry]:
        self._check("get_events")
        return [
            event
            for (owner, _), event in self.events.items()
            if owner == receiver_id
        ]

    def delete_event(self, receiver_id: str, event_id: str) -> None:
        self._check("delete_event")
        self.events.pop((receiver_id, event_id), None)


@dataclass
class InMemoryNotificationRepository(FailureInjection, NotificationRepository):
    """Records queued notifications."""

    notifications: list[dict[str, object]] = field(default_factory=list)

    def enqueue(
        self,
        notification_type: str,
        channel: list[str],
        execution_data: dict[str, object],
    ) -> None:
        self._check("enqueue")
        self.notifications.append(
            {
                "notification_type": notification_type,
                "channel": channel,
                "execution_data": execution_data,
            }
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        feedback_email="feedback@example.com",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    repository = InMemoryUserRepository()
    for user in (
        UserRecord(CAREGIVER_ID, "care@example.com", "Casey", "Giver"),
        UserRecord(OUTSIDER_ID, "outsider@example.com", "Olly", "Outsider"),
    ):
        repository.users[user.user_id] = user
    return repository


@pytest.fixture
def receiver_repository() -> InMemoryReceiverRepository:
    repository = InMemoryReceiverRepository()
    repository.receivers[RECEIVER_ID] = ReceiverRecord(RECEIVER_ID, "Rita", "Receiver")
    return repository


@pytest.fixture
def relationship_repository() -> InMemoryRelationshipRepository:
    repository = InMemoryRelationshipRepository()
    repository.add_relationship(
        RelationshipRecord(CAREGIVER_ID, RECEIVER_ID, primary_care_giver=True)
    )
    return repository


@pytest.fixture
def event_repository() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    receiver_repository: InMemoryReceiverRepository,
    relationship_repository: InMemoryRelationshipRepository,
    event_repository: InMemoryEventRepository,
    notification_repository: InMemoryNotificationRepository,
) -> AppContainer:
    relationship_service = RelationshipService(relationship_repository)
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        receiver_service=ReceiverService(
            repository=receiver_repository,
            relationship_service=relationship_service,
        ),
        relationship_service=relationship_service,
        event_service=EventService(event_repository),
        feedback_service=FeedbackService(
            repository=notification_repository,
            feedback_email=settings.feedback_email,
        ),
    )
