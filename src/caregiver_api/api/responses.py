"""Request and response envelopes shared by every handler."""

import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus

logger = logging.getLogger(__name__)

SUCCESS = "Success"
BAD_REQUEST = "Bad Request"
ACCESS_DENIED = "Access Denied"
INTERNAL_SERVER_ERROR = "Internal Server Error"
RESOURCE_NOT_FOUND = "Resource Not Found"


@dataclass(frozen=True)
class ApiRequest:
    """Host-independent view of an inbound request.

    ``resource`` is the route template (``/events/{receiverId}``), already
    resolved by the hosting gateway.
    """

    resource: str
    method: str
    path_parameters: dict[str, str] = field(default_factory=dict)
    query_parameters: dict[str, str] = field(default_factory=dict)
    body: str | None = None


@dataclass(frozen=True)
class ApiResponse:
    """Status code plus a JSON-encoded body."""

    status_code: int
    body: str

    def json(self) -> object:
        return json.loads(self.body)


def format_response(payload: object, status_code: int = HTTPStatus.OK) -> ApiResponse:
    """Serialize ``payload``; serialization failures become a 500."""
    try:
        body = json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError):
        logger.exception("Unable to serialize response")
        return internal_server_error()
    return ApiResponse(status_code=int(status_code), body=body)


def success(**fields: object) -> ApiResponse:
    """Return a 200 body with the given fields and a success status."""
    return format_response({**fields, "status": SUCCESS})


def _error(
    status: str, status_code: int, developer_text: str | None = None
) -> ApiResponse:
    payload = {"status": status}
    if developer_text:
        payload["developerText"] = developer_text
    return ApiResponse(
        status_code=int(status_code), body=json.dumps(payload, allow_nan=False)
    )


def bad_request(developer_text: str | None = None) -> ApiResponse:
    return _error(BAD_REQUEST, HTTPStatus.BAD_REQUEST, developer_text)


def access_denied(developer_text: str | None = None) -> ApiResponse:
    return _error(ACCESS_DENIED, HTTPStatus.FORBIDDEN, developer_text)


def internal_server_error(developer_text: str | None = None) -> ApiResponse:
    return _error(
        INTERNAL_SERVER_ERROR, HTTPStatus.INTERNAL_SERVER_ERROR, developer_text
    )


def resource_not_found(developer_text: str | None = None) -> ApiResponse:
    return _error(RESOURCE_NOT_FOUND, HTTPStatus.NOT_FOUND, developer_text)
