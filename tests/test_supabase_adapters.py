"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

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
from caregiver_api.domain.errors import ItemNotFoundError
from caregiver_api.domain.events import EventKind, new_event_entry
from caregiver_api.domain.models import ReceiverRecord, RelationshipRecord, UserRecord


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


USER_ROW = {
    "user_id": "User#1",
    "email": "care@example.com",
    "first_name": "Casey",
    "last_name": "Giver",
}


def test_supabase_user_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("user-table-test")
    users_table.queue("insert", [USER_ROW])
    users_table.queue("select", [USER_ROW])

    repository = SupabaseUserRepository(client, "user-table-test")
    repository.create_user(UserRecord("User#1", "care@example.com", "Casey", "Giver"))
    fetched = repository.get_user("User#1")

    assert users_table.last_payload == USER_ROW
    assert fetched == UserRecord("User#1", "care@example.com", "Casey", "Giver")
    assert users_table.last_filters == [("user_id", "User#1")]


def test_supabase_user_repository_lookup_by_email() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    users_table.queue("select", [USER_ROW])

    fetched = SupabaseUserRepository(client, "users").get_user_by_email(
        "care@example.com"
    )

    assert fetched.user_id == "User#1"
    assert users_table.last_filters == [("email", "care@example.com")]


def test_supabase_user_repository_missing_user() -> None:
    repository = SupabaseUserRepository(FakeSupabaseClient(), "users")

    with pytest.raises(ItemNotFoundError):
        repository.get_user("User#missing")


def test_supabase_user_repository_insert_without_data_fails() -> None:
    repository = SupabaseUserRepository(FakeSupabaseClient(), "users")

    with pytest.raises(RuntimeError):
        repository.create_user(
            UserRecord("User#1", "care@example.com", "Casey", "Giver")
        )


def test_supabase_receiver_repository_create_get_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("receivers")
    row = {"receiver_id": "Receiver#1", "first_name": "Rita", "last_name": "R"}
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseReceiverRepository(client, "receivers")
    repository.create_receiver(ReceiverRecord("Receiver#1", "Rita", "R"))
    fetched = repository.get_receiver("Receiver#1")
    repository.delete_receiver("Receiver#1")

    assert fetched == ReceiverRecord("Receiver#1", "Rita", "R")
    assert table.actions == ["insert", "select", "delete"]
    assert table.last_filters[-1] == ("receiver_id", "Receiver#1")


def test_supabase_receiver_repository_missing_receiver() -> None:
    repository = SupabaseReceiverRepository(FakeSupabaseClient(), "receivers")

    with pytest.raises(ItemNotFoundError):
        repository.get_receiver("Receiver#missing")


def test_supabase_relationship_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("relationships")
    table.queue("insert", [{"user_id": "User#1"}])
    table.queue(
        "select",
        [
            {
                "user_id": "User#1",
                "receiver_id": "Receiver#1",
                "primary_care_giver": True,
                "email_notifications": False,
            }
        ],
    )

    repository = SupabaseRelationshipRepository(client, "relationships")
    repository.add_relationship(
        RelationshipRecord("User#1", "Receiver#1", primary_care_giver=True)
    )
    relationships = repository.get_relationships_by_user("User#1")

    assert table.last_payload == {
        "user_id": "User#1",
        "receiver_id": "Receiver#1",
        "primary_care_giver": True,
        "email_notifications": True,
    }
    assert relationships == [
        RelationshipRecord(
            "User#1",
            "Receiver#1",
            primary_care_giver=True,
            email_notifications=False,
        )
    ]


def test_supabase_relationship_repository_get_and_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("relationships")
    table.queue(
        "select",
        [
            {
                "user_id": "User#1",
                "receiver_id": "Receiver#1",
                "primary_care_giver": False,
            }
        ],
    )

    repository = SupabaseRelationshipRepository(client, "relationships")
    relationship = repository.get_relationship("User#1", "Receiver#1")
    repository.delete_relationship("User#1", "Receiver#1")

    assert relationship == RelationshipRecord(
        "User#1", "Receiver#1", primary_care_giver=False
    )
    assert table.actions == ["select", "delete"]
    assert table.last_filters[-2:] == [
        ("user_id", "User#1"),
        ("receiver_id", "Receiver#1"),
    ]
    with pytest.raises(ItemNotFoundError):
        repository.get_relationship("User#2", "Receiver#1")


def test_supabase_relationship_repository_empty() -> None:
    repository = SupabaseRelationshipRepository(FakeSupabaseClient(), "relationships")

    assert repository.get_relationships_by_user("User#1") == []


def test_supabase_event_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("events")
    event = new_event_entry(
        EventKind.WEIGHT,
        "Receiver#1",
        "User#1",
        timestamp="2024-03-01T10:15:00Z",
        data={"weight": 70.5},
    )
    table.queue("insert", [{"event_id": event.event_id}])
    table.queue(
        "select",
        [
            {
                "event_id": event.event_id,
                "receiver_id": "Receiver#1",
                "user_id": "User#1",
                "type": "Weight",
                "timestamp": "2024-03-01T10:15:00Z",
                "data": {"weight": 70.5},
                "note": None,
            }
        ],
    )

    repository = SupabaseEventRepository(client, "events")
    repository.add_event(event)
    events = repository.get_events("Receiver#1")
    repository.delete_event("Receiver#1", event.event_id)

    assert table.last_payload["type"] == "Weight"  # type: ignore[index]
    assert events == [event]
    assert table.last_filters[-2:] == [
        ("receiver_id", "Receiver#1"),
        ("event_id", event.event_id),
    ]


def test_supabase_notification_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("notifications")

    SupabaseNotificationRepository(client, "notifications").enqueue(
        "feedback", ["email"], {"email": "team@example.com", "message": "hi"}
    )

    assert table.last_payload == {
        "notification_type": "feedback",
        "channel": ["email"],
        "execution_data": {"email": "team@example.com", "message": "hi"},
    }
