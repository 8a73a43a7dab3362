"""Catalog of care events that can be recorded for a receiver.

Every kind owns a pydantic schema for its ``data`` payload. Schemas forbid
unknown fields and use strict types, so a payload either matches its kind
exactly or is rejected as a client error.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from caregiver_api.domain.errors import InvalidEventDataError, UnsupportedEventKindError
from caregiver_api.domain.models import new_id

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class EventKind(StrEnum):
    """Supported event types; the value doubles as the event id prefix."""

    SHOWER = "Shower"
    MEDICATION = "Medication"
    URINATION = "Urination"
    BOWEL_MOVEMENT = "BowelMovement"
    WEIGHT = "Weight"


class EventData(BaseModel):
    """Base schema for event payloads."""

    model_config = ConfigDict(
        extra="forbid", strict=True, frozen=True, allow_inf_nan=False
    )


class ShowerData(EventData):
    pass


class MedicationData(EventData):
    pass


class UrinationData(EventData):
    pass


class BowelMovementData(EventData):
    pass


class WeightData(EventData):
    weight: float = Field(gt=0)


_DATA_SCHEMAS: dict[EventKind, type[EventData]] = {
    EventKind.SHOWER: ShowerData,
    EventKind.MEDICATION: MedicationData,
    EventKind.URINATION: UrinationData,
    EventKind.BOWEL_MOVEMENT: BowelMovementData,
    EventKind.WEIGHT: WeightData,
}

# Payloads that must be supplied even when the kind's schema could accept {}.
_DATA_REQUIRED = frozenset({EventKind.WEIGHT})

_unmapped = set(EventKind) - _DATA_SCHEMAS.keys()
if _unmapped:
    raise RuntimeError(f"event kinds without a data schema: {sorted(_unmapped)}")


@dataclass(frozen=True)
class EventEntry:
    """A recorded care event."""

    event_id: str
    receiver_id: str
    user_id: str
    kind: EventKind
    timestamp: str
    data: dict[str, object] = field(default_factory=dict)
    note: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "eventId": self.event_id,
            "receiverId": self.receiver_id,
            "userId": self.user_id,
            "type": self.kind.value,
            "timestamp": self.timestamp,
            "data": self.data,
        }
        if self.note is not None:
            payload["note"] = self.note
        return payload


def parse_event_kind(name: str) -> EventKind:
    """Map a caller supplied type name to its catalog entry."""
    try:
        return EventKind(name)
    except ValueError as exc:
        raise UnsupportedEventKindError(name) from exc


def event_id_prefixes() -> tuple[str, ...]:
    """Return every id prefix an event id may carry."""
    return tuple(kind.value for kind in EventKind)


def process_event_data(
    kind: EventKind, data: dict[str, object] | None
) -> dict[str, object]:
    """Validate a payload against the kind's schema and return it normalized."""
    if data is None:
        if kind in _DATA_REQUIRED:
            raise InvalidEventDataError(f"no {kind.value} data provided")
        data = {}
    try:
        parsed = _DATA_SCHEMAS[kind].model_validate(data)
    except ValidationError as exc:
        raise InvalidEventDataError(
            f"invalid {kind.value} data: {exc.error_count()} error(s)"
        ) from exc
    return parsed.model_dump()


def new_event_entry(  # noqa: PLR0913
    kind: EventKind,
    receiver_id: str,
    user_id: str,
    *,
    timestamp: str | None = None,
    data: dict[str, object] | None = None,
    note: str | None = None,
) -> EventEntry:
    """Build an event entry with a generated id and a validated payload."""
    return EventEntry(
        event_id=new_id(kind.value),
        receiver_id=receiver_id,
        user_id=user_id,
        kind=kind,
        timestamp=resolve_timestamp(timestamp),
        data=process_event_data(kind, data),
        note=note,
    )


def resolve_timestamp(raw: str | None, now: datetime | None = None) -> str:
    """Return ``raw`` when it is an ISO-8601 date-time with an offset.

    Anything else (missing, date only, no offset) becomes the current UTC time.
    """
    if raw and _parse_iso8601(raw) is not None:
        return raw
    return (now or datetime.now(tz=UTC)).astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def _parse_iso8601(raw: str) -> datetime | None:
    if "T" not in raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo is not None else None
