"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from caregiver_api.domain.models import UserRecord, new_user


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, user: UserRecord) -> None:
        """Store a new user record."""

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user for an id or raise ItemNotFoundError."""

    def get_user_by_email(self, email: str) -> UserRecord:
        """Return the user registered with an email or raise ItemNotFoundError."""


@dataclass
class UserService:
    """Application service for user accounts."""

    repository: UserRepository

    def register(self, email: str, first_name: str, last_name: str) -> UserRecord:
        """Create and persist a new user."""
        user = new_user(email, first_name, last_name)
        self.repository.create_user(user)
        return user

    def get_user(self, user_id: str) -> UserRecord:
        """Return a stored user."""
        return self.repository.get_user(user_id)

    def find_by_email(self, email: str) -> UserRecord:
        """Return the user registered with an email."""
        return self.repository.get_user_by_email(email)
