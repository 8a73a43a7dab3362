"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from caregiver_api.api.registry import Endpoint, Registry
from caregiver_api.api.responses import ApiRequest
from caregiver_api.app_logging import configure_logging
from caregiver_api.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving every registered endpoint."""
    configure_logging(container.settings.environment, container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Caregiver API")
    app.state.container = container
    registry = Registry(container)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    for endpoint in registry.endpoints:
        app.add_api_route(
            endpoint.path,
            _route(registry, endpoint),
            methods=[endpoint.method],
            name=f"{endpoint.method} {endpoint.path}",
        )

    # Anything else still goes through the registry, which answers 400.
    app.add_api_route(
        "/{resource:path}",
        _fallback_route(registry),
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )

    logger.info("Registered %d endpoints", len(registry.endpoints))
    return app


def _route(registry: Registry, endpoint: Endpoint):  # type: ignore[no-untyped-def]
    async def route(request: Request) -> Response:
        return await _dispatch(
            registry,
            request,
            resource=endpoint.path,
            path_parameters=dict(request.path_params),
        )

    return route


def _fallback_route(registry: Registry):  # type: ignore[no-untyped-def]
    async def fallback(request: Request) -> Response:
        return await _dispatch(
            registry, request, resource=request.url.path, path_parameters={}
        )

    return fallback


async def _dispatch(
    registry: Registry,
    request: Request,
    *,
    resource: str,
    path_parameters: dict[str, str],
) -> Response:
    raw_body = await request.body()
    api_request = ApiRequest(
        resource=resource,
        method=request.method,
        path_parameters=path_parameters,
        query_parameters=dict(request.query_params),
        body=raw_body.decode(errors="replace") if raw_body else None,
    )
    api_response = await run_in_threadpool(registry.dispatch, api_request)
    return Response(
        content=api_response.body,
        status_code=api_response.status_code,
        media_type="application/json",
    )
