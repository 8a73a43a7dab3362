"""User feedback delivered through the notification outbox."""

from dataclasses import dataclass
from typing import Protocol

FEEDBACK_NOTIFICATION = "feedback"
EMAIL_CHANNEL = "email"


class NotificationRepository(Protocol):
    """Persistence interface for outgoing notifications."""

    def enqueue(
        self,
        notification_type: str,
        channel: list[str],
        execution_data: dict[str, object],
    ) -> None:
        """Queue a notification for delivery."""


@dataclass
class FeedbackService:
    """Service that forwards feedback to the team inbox."""

    repository: NotificationRepository
    feedback_email: str | None

    def submit(self, message: str) -> None:
        """Queue a feedback email containing ``message``."""
        if not self.feedback_email:
            raise RuntimeError("Feedback email is not configured")
        self.repository.enqueue(
            notification_type=FEEDBACK_NOTIFICATION,
            channel=[EMAIL_CHANNEL],
            execution_data={"email": self.feedback_email, "message": message},
        )
