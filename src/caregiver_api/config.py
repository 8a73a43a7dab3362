"""Application configuration."""

import os

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOCAL_ENVIRONMENT = "local"

_ENVIRONMENT = os.getenv("ENV", LOCAL_ENVIRONMENT)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = Field(
        default=_ENVIRONMENT, validation_alias=AliasChoices("ENV", "ENVIRONMENT")
    )
    supabase_url: str
    supabase_service_key: str
    user_table_name: str | None = None
    receiver_table_name: str | None = None
    event_table_name: str | None = None
    relationship_table_name: str | None = None
    notification_table_name: str | None = None
    feedback_email: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _default_table_names(self) -> "Settings":
        """Fill unset table names as `<entity>-table-<environment>`."""
        for entity in ("user", "receiver", "event", "relationship", "notification"):
            attribute = f"{entity}_table_name"
            if not getattr(self, attribute):
                setattr(self, attribute, table_name(entity, self.environment))
        return self


def table_name(entity: str, environment: str) -> str:
    """Return the default table name for an entity in an environment."""
    return f"{entity}-table-{environment}"
