"""Pydantic models for request bodies.

Bodies are decoded strictly: unknown fields are rejected, types are not
coerced and required strings must be non-empty.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestModel(BaseModel):
    """Base model for strictly decoded request bodies."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class CreateUserRequest(RequestModel):
    """Body of POST /user."""

    email: str = Field(min_length=1)
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)


class PrimaryReceiverRequest(RequestModel):
    """Body of POST /user/primary-receiver."""

    user_id: str = Field(alias="userId", min_length=1)
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)


class AdditionalReceiverRequest(RequestModel):
    """Body of POST /user/additional-receiver."""

    user_id: str = Field(alias="userId", min_length=1)
    receiver_id: str = Field(alias="receiverId", min_length=1)
    email: str = Field(min_length=1)


class ReceiverEventRequest(RequestModel):
    """Body of POST /event."""

    receiver_id: str = Field(alias="receiverId", min_length=1)
    user_id: str = Field(alias="userId", min_length=1)
    type: str = Field(min_length=1)
    timestamp: str | None = None
    data: dict[str, Any] | None = None
    note: str | None = None


class FeedbackRequest(RequestModel):
    """Body of POST /feedback."""

    message: str = Field(min_length=1)
