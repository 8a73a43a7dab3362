"""Domain models for caregivers, receivers and their relationships."""

from dataclasses import dataclass
from uuid import uuid4

ID_SEPARATOR = "#"
USER_ID_PREFIX = "User"
RECEIVER_ID_PREFIX = "Receiver"


def new_id(prefix: str) -> str:
    """Return a fresh `<prefix>#<uuid>` identifier."""
    return f"{prefix}{ID_SEPARATOR}{uuid4()}"


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered caregiver account."""

    user_id: str
    email: str
    first_name: str
    last_name: str

    def to_dict(self) -> dict[str, object]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


@dataclass(frozen=True)
class ReceiverRecord:
    """Represents a person receiving care."""

    receiver_id: str
    first_name: str
    last_name: str

    def to_dict(self) -> dict[str, object]:
        return {
            "receiverId": self.receiver_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


@dataclass(frozen=True)
class RelationshipRecord:
    """Links a caregiver to a receiver."""

    user_id: str
    receiver_id: str
    primary_care_giver: bool
    email_notifications: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "userId": self.user_id,
            "receiverId": self.receiver_id,
            "primaryCareGiver": self.primary_care_giver,
            "emailNotifications": self.email_notifications,
        }


def new_user(email: str, first_name: str, last_name: str) -> UserRecord:
    """Create a user record with a generated id."""
    return UserRecord(
        user_id=new_id(USER_ID_PREFIX),
        email=email,
        first_name=first_name,
        last_name=last_name,
    )


def new_receiver(first_name: str, last_name: str) -> ReceiverRecord:
    """Create a receiver record with a generated id."""
    return ReceiverRecord(
        receiver_id=new_id(RECEIVER_ID_PREFIX),
        first_name=first_name,
        last_name=last_name,
    )
