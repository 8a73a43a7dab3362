"""Endpoint registry mapping route templates and methods to handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from caregiver_api.api import handlers, responses

if TYPE_CHECKING:
    from caregiver_api.api.responses import ApiRequest, ApiResponse
    from caregiver_api.containers import AppContainer

logger = logging.getLogger(__name__)

HandlerFunc = Callable[["ApiRequest", "AppContainer"], "ApiResponse"]

STAGE_PREFIXES = ("/Stage", "/Prod")


@dataclass(frozen=True)
class Endpoint:
    """A route template plus HTTP method."""

    path: str
    method: str


ENDPOINTS: dict[Endpoint, HandlerFunc] = {
    Endpoint("/user", "POST"): handlers.handle_create_user,
    Endpoint("/user/{userId}", "GET"): handlers.handle_get_user,
    Endpoint("/user/relationships/{userId}", "GET"): handlers.handle_get_relationships,
    Endpoint("/user/primary-receiver", "POST"): handlers.handle_primary_receiver,
    Endpoint("/user/additional-receiver", "POST"): handlers.handle_additional_receiver,
    Endpoint("/receiver/{receiverId}", "GET"): handlers.handle_get_receiver,
    Endpoint("/event", "POST"): handlers.handle_add_event,
    Endpoint("/event/{eventId}", "DELETE"): handlers.handle_delete_event,
    Endpoint("/events/{receiverId}", "GET"): handlers.handle_get_events,
    Endpoint("/feedback", "POST"): handlers.handle_feedback,
}


def remove_path_prefix(path: str) -> str:
    """Strip deployment stage segments such as ``/Stage`` from a path."""
    for prefix in STAGE_PREFIXES:
        path = path.removeprefix(prefix)
    return path


@dataclass(frozen=True)
class Registry:
    """Resolves requests to handlers and injects the shared dependencies.

    Lookup is an exact match on the route template; ``{param}`` segments are
    never parsed here, the host must pass the template it matched.
    """

    container: AppContainer
    endpoints: Mapping[Endpoint, HandlerFunc] = field(
        default_factory=lambda: ENDPOINTS
    )

    def get_handler(self, request: ApiRequest) -> HandlerFunc | None:
        endpoint = Endpoint(
            path=remove_path_prefix(request.resource),
            method=request.method.upper(),
        )
        return self.endpoints.get(endpoint)

    def run_handler(self, handler: HandlerFunc, request: ApiRequest) -> ApiResponse:
        return handler(request, self.container)

    def dispatch(self, request: ApiRequest) -> ApiResponse:
        """Route a request, answering unknown endpoints with a bad request."""
        handler = self.get_handler(request)
        if handler is None:
            logger.error(
                "Unsupported request path %s %s", request.method, request.resource
            )
            return responses.bad_request()
        return self.run_handler(handler, request)
