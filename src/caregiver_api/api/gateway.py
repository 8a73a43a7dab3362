"""Adapter between API Gateway proxy events and the endpoint registry."""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from caregiver_api.api import responses
from caregiver_api.api.registry import Registry
from caregiver_api.api.responses import ApiRequest, ApiResponse
from caregiver_api.app_logging import configure_logging

if TYPE_CHECKING:
    from caregiver_api.containers import AppContainer

logger = logging.getLogger(__name__)

LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]


def to_api_request(event: dict[str, Any]) -> ApiRequest:
    """Build an ApiRequest from a REST API proxy event.

    ``resource`` carries the matched template (``/user/{userId}``); the
    concrete path is only used when the event has no resource.
    """
    request_context = event.get("requestContext") or {}
    resource = (
        event.get("resource")
        or request_context.get("resourcePath")
        or event.get("path")
        or "/"
    )
    method = event.get("httpMethod") or request_context.get("httpMethod") or "GET"
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return ApiRequest(
        resource=resource,
        method=method.upper(),
        path_parameters=dict(event.get("pathParameters") or {}),
        query_parameters=dict(event.get("queryStringParameters") or {}),
        body=body,
    )


def to_proxy_response(response: ApiResponse) -> dict[str, Any]:
    """Render an ApiResponse in the shape API Gateway expects."""
    return {
        "statusCode": response.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": response.body,
    }


def create_lambda_handler(container: AppContainer) -> LambdaHandler:
    """Return a Lambda handler bound to ``container``."""
    configure_logging(container.settings.environment, container.settings.log_level)
    registry = Registry(container)

    def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        logger.info("Received event")
        try:
            request = to_api_request(event)
        except (binascii.Error, UnicodeDecodeError):
            logger.exception("Unable to decode request body")
            return to_proxy_response(responses.bad_request())
        logger.info("Event path: %s %s", request.method, request.resource)
        return to_proxy_response(registry.dispatch(request))

    return lambda_handler
