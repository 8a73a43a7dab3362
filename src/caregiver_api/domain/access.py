"""Caregiver authorization rules.

Both checks are pure membership tests over relationships that the caller has
already loaded. They never raise; handlers translate ``False`` into an access
denied response.
"""

from collections.abc import Iterable

from caregiver_api.domain.models import RelationshipRecord


def is_caregiver(
    user_id: str, receiver_id: str, relationships: Iterable[RelationshipRecord]
) -> bool:
    """Return True when the user is linked to the receiver in any role."""
    return any(
        relationship.user_id == user_id and relationship.receiver_id == receiver_id
        for relationship in relationships
    )


def is_primary_caregiver(
    user_id: str, receiver_id: str, relationships: Iterable[RelationshipRecord]
) -> bool:
    """Return True when the user is the receiver's primary caregiver."""
    return any(
        relationship.user_id == user_id
        and relationship.receiver_id == receiver_id
        and relationship.primary_care_giver
        for relationship in relationships
    )
