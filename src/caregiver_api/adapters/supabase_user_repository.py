"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from caregiver_api.domain.errors import ItemNotFoundError
from caregiver_api.domain.models import UserRecord
from caregiver_api.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    table: str

    def create_user(self, user: UserRecord) -> None:
        """Insert a user row."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": user.user_id,
                    "email": user.email,
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")

    def get_user(self, user_id: str) -> UserRecord:
        """Return the user row for an id."""
        return self._get_one("user_id", user_id)

    def get_user_by_email(self, email: str) -> UserRecord:
        """Return the user row registered with an email."""
        return self._get_one("email", email)

    def _get_one(self, column: str, value: str) -> UserRecord:
        response = (
            self.client.table(self.table)
            .select("user_id, email, first_name, last_name")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise ItemNotFoundError(self.table, {column: value})
        row = response.data[0]
        return UserRecord(
            user_id=row["user_id"],
            email=row["email"],
            first_name=row["first_name"],
            last_name=row["last_name"],
        )
