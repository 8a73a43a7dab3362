"""Request handlers, one per endpoint.

Each handler runs the same pipeline and stops at the first failure:
validate input (400), load the caller's relationships (500), authorize (403),
build the event where relevant (400), call the store (500), respond (200).
Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from caregiver_api.api import responses
from caregiver_api.api.schemas import (
    AdditionalReceiverRequest,
    CreateUserRequest,
    FeedbackRequest,
    PrimaryReceiverRequest,
    ReceiverEventRequest,
)
from caregiver_api.api.validation import (
    read_request_body,
    validate_path_parameter,
    validate_query_parameter,
)
from caregiver_api.domain.access import is_caregiver, is_primary_caregiver
from caregiver_api.domain.errors import InvalidRequestError
from caregiver_api.domain.events import (
    event_id_prefixes,
    new_event_entry,
    parse_event_kind,
)
from caregiver_api.domain.models import RECEIVER_ID_PREFIX, USER_ID_PREFIX

if TYPE_CHECKING:
    from caregiver_api.api.responses import ApiRequest, ApiResponse
    from caregiver_api.containers import AppContainer

logger = logging.getLogger(__name__)

USER_ID_PARAM = "userId"
RECEIVER_ID_PARAM = "receiverId"
EVENT_ID_PARAM = "eventId"


def handle_create_user(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """POST /user"""
    logger.info("Handling create user")
    try:
        body = read_request_body(request.body, CreateUserRequest)
    except InvalidRequestError as exc:
        logger.error("Error reading request body: %s", exc)
        return responses.bad_request()

    try:
        user = container.user_service.register(
            body.email, body.first_name, body.last_name
        )
    except Exception:
        logger.exception("Error creating user in db")
        return responses.internal_server_error()

    logger.info("Created user %s", user.user_id)
    return responses.success(userId=user.user_id)


def handle_get_user(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """GET /user/{userId}"""
    logger.info("Handling get user")
    try:
        user_id = validate_path_parameter(
            request.path_parameters, USER_ID_PARAM, USER_ID_PREFIX
        )
    except InvalidRequestError as exc:
        logger.error(
            "Error validating path parameters %s: %s", request.path_parameters, exc
        )
        return responses.bad_request()

    try:
        user = container.user_service.get_user(user_id)
    except Exception:
        logger.exception("Error retrieving user %s from db", user_id)
        return responses.internal_server_error()

    logger.info("Processed get user %s", user_id)
    return responses.format_response(user.to_dict())


def handle_get_relationships(
    request: ApiRequest, container: AppContainer
) -> ApiResponse:
    """GET /user/relationships/{userId}"""
    logger.info("Handling get relationships")
    try:
        user_id = validate_path_parameter(
            request.path_parameters, USER_ID_PARAM, USER_ID_PREFIX
        )
    except InvalidRequestError as exc:
        logger.error(
            "Error validating path parameters %s: %s", request.path_parameters, exc
        )
        return responses.bad_request()

    try:
        relationships = container.relationship_service.list_for_user(user_id)
    except Exception:
        logger.exception("Error retrieving relationships of user %s", user_id)
        return responses.internal_server_error()

    logger.info("Processed get relationships for user %s", user_id)
    return responses.success(
        relationships=[relationship.to_dict() for relationship in relationships]
    )


def handle_primary_receiver(
    request: ApiRequest, container: AppContainer
) -> ApiResponse:
    """POST /user/primary-receiver"""
    logger.info("Handling add primary receiver")
    try:
        body = read_request_body(request.body, PrimaryReceiverRequest)
    except InvalidRequestError as exc:
        logger.error("Error reading request body: %s", exc)
        return responses.bad_request()

    try:
        container.user_service.get_user(body.user_id)
    except Exception:
        logger.exception("Error retrieving user %s from db", body.user_id)
        return responses.internal_server_error()

    try:
        receiver = container.receiver_service.register_primary_receiver(
            body.user_id, body.first_name, body.last_name
        )
    except Exception:
        logger.exception("Error registering primary receiver for %s", body.user_id)
        return responses.internal_server_error()

    logger.info(
        "Added primary receiver %s for user %s", receiver.receiver_id, body.user_id
    )
    return responses.success(receiverId=receiver.receiver_id)


def handle_additional_receiver(
    request: ApiRequest, container: AppContainer
) -> ApiResponse:
    """POST /user/additional-receiver

    ``userId`` must be the receiver's primary caregiver; the user registered
    with ``email`` becomes an additional caregiver.
    """
    logger.info("Handling add additional receiver")
    try:
        body = read_request_body(request.body, AdditionalReceiverRequest)
    except InvalidRequestError as exc:
        logger.error("Error reading request body: %s", exc)
        return responses.bad_request()

    relationship_service = container.relationship_service
    try:
        inviter_relationships = relationship_service.list_for_user(body.user_id)
    except Exception:
        logger.exception("Error retrieving relationships of user %s", body.user_id)
        return responses.internal_server_error()

    if not is_primary_caregiver(body.user_id, body.receiver_id, inviter_relationships):
        logger.error(
            "User %s is not the primary caregiver of receiver %s",
            body.user_id,
            body.receiver_id,
        )
        return responses.access_denied()

    try:
        invitee = container.user_service.find_by_email(body.email)
        invitee_relationships = relationship_service.list_for_user(invitee.user_id)
    except Exception:
        logger.exception("Error retrieving invited user from db")
        return responses.internal_server_error()

    if is_caregiver(invitee.user_id, body.receiver_id, invitee_relationships):
        logger.error(
            "User %s is already a caregiver of receiver %s",
            invitee.user_id,
            body.receiver_id,
        )
        return responses.bad_request()

    try:
        relationship_service.add_additional_caregiver(
            invitee.user_id, body.receiver_id
        )
    except Exception:
        logger.exception("Error adding relationship for user %s", invitee.user_id)
        return responses.internal_server_error()

    logger.info(
        "Added user %s as additional caregiver of %s",
        invitee.user_id,
        body.receiver_id,
    )
    return responses.success()


def handle_get_receiver(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """GET /receiver/{receiverId}?userId="""
    logger.info("Handling get receiver")
    try:
        receiver_id = validate_path_parameter(
            request.path_parameters, RECEIVER_ID_PARAM, RECEIVER_ID_PREFIX
        )
        user_id = validate_query_parameter(request.query_parameters, USER_ID_PARAM)
    except InvalidRequestError as exc:
        logger.error("Error validating parameters: %s", exc)
        return responses.bad_request()

    denied = _authorize(container, user_id, receiver_id)
    if denied is not None:
        return denied

    try:
        receiver = container.receiver_service.get_receiver(receiver_id)
    except Exception:
        logger.exception("Error retrieving receiver %s from db", receiver_id)
        return responses.internal_server_error()

    logger.info("Processed get receiver %s", receiver_id)
    return responses.format_response(receiver.to_dict())


def handle_add_event(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """POST /event"""
    logger.info("Handling add receiver event")
    try:
        body = read_request_body(request.body, ReceiverEventRequest)
    except InvalidRequestError as exc:
        logger.error("Error reading request body: %s", exc)
        return responses.bad_request()

    denied = _authorize(container, body.user_id, body.receiver_id)
    if denied is not None:
        return denied

    try:
        event = new_event_entry(
            parse_event_kind(body.type),
            body.receiver_id,
            body.user_id,
            timestamp=body.timestamp,
            data=body.data,
            note=body.note,
        )
    except InvalidRequestError as exc:
        logger.error("Error creating event entry: %s", exc)
        return responses.bad_request()

    try:
        container.event_service.add_event(event)
    except Exception:
        logger.exception("Error adding event %s to db", event.event_id)
        return responses.internal_server_error()

    logger.info("Added event %s for receiver %s", event.event_id, body.receiver_id)
    return responses.success(receiverId=body.receiver_id, eventId=event.event_id)


def handle_delete_event(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """DELETE /event/{eventId}?receiverId=&userId="""
    logger.info("Handling delete receiver event")
    try:
        event_id = validate_path_parameter(
            request.path_parameters, EVENT_ID_PARAM, event_id_prefixes()
        )
        receiver_id = validate_query_parameter(
            request.query_parameters, RECEIVER_ID_PARAM
        )
        user_id = validate_query_parameter(request.query_parameters, USER_ID_PARAM)
    except InvalidRequestError as exc:
        logger.error("Error validating parameters: %s", exc)
        return responses.bad_request()

    denied = _authorize(container, user_id, receiver_id)
    if denied is not None:
        return denied

    try:
        container.event_service.delete_event(receiver_id, event_id)
    except Exception:
        logger.exception("Error deleting event %s from db", event_id)
        return responses.internal_server_error()

    logger.info("Deleted event %s of receiver %s", event_id, receiver_id)
    return responses.success()


def handle_get_events(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """GET /events/{receiverId}?userId="""
    logger.info("Handling get receiver events")
    try:
        receiver_id = validate_path_parameter(
            request.path_parameters, RECEIVER_ID_PARAM, RECEIVER_ID_PREFIX
        )
        user_id = validate_query_parameter(request.query_parameters, USER_ID_PARAM)
    except InvalidRequestError as exc:
        logger.error("Error validating parameters: %s", exc)
        return responses.bad_request()

    denied = _authorize(container, user_id, receiver_id)
    if denied is not None:
        return denied

    try:
        events = container.event_service.list_events(receiver_id)
    except Exception:
        logger.exception("Error retrieving events of receiver %s", receiver_id)
        return responses.internal_server_error()

    logger.info("Processed get events for receiver %s", receiver_id)
    return responses.format_response([event.to_dict() for event in events])


def handle_feedback(request: ApiRequest, container: AppContainer) -> ApiResponse:
    """POST /feedback"""
    logger.info("Handling submit feedback")
    try:
        body = read_request_body(request.body, FeedbackRequest)
    except InvalidRequestError as exc:
        logger.error("Error reading request body: %s", exc)
        return responses.bad_request()

    try:
        container.feedback_service.submit(body.message)
    except Exception:
        logger.exception("Error queueing feedback notification")
        return responses.internal_server_error()

    logger.info("Processed submit feedback")
    return responses.success()


def _authorize(
    container: AppContainer, user_id: str, receiver_id: str
) -> ApiResponse | None:
    """Return an error response unless the user is a caregiver of the receiver."""
    try:
        relationships = container.relationship_service.list_for_user(user_id)
    except Exception:
        logger.exception("Error retrieving relationships of user %s", user_id)
        return responses.internal_server_error()
    if not is_caregiver(user_id, receiver_id, relationships):
        logger.error(
            "User %s is not a caregiver of receiver %s", user_id, receiver_id
        )
        return responses.access_denied()
    return None
