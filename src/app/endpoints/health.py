"""Handlers for health REST API endpoints.

These endpoints are used to check if service is live and prepared to accept
requests. Note that these endpoints can be accessed using GET or HEAD HTTP
methods. For HEAD HTTP method, just the HTTP response code is used.
"""

import logging
from typing import Any

from fastapi import APIRouter, Response, status

from client import AsyncChatClientHolder, AsyncSearchClientHolder
from configuration import LogicError, configuration
from models.responses import (
    ComponentStatus,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


get_readiness_responses: dict[int | str, dict[str, Any]] = {
    200: ReadinessResponse.openapi_response(),
    503: {"description": "Service is not ready", "model": ReadinessResponse},
}

get_liveness_responses: dict[int | str, dict[str, Any]] = {
    200: LivenessResponse.openapi_response(),
}


def get_components_statuses() -> list[ComponentStatus]:
    """
    Retrieve the readiness of all service components.

    The caches must report readiness and both provider clients must be
    created; configuration must be loaded for any of them to be usable.

    Returns:
        list[ComponentStatus]: Status of every component.
    """
    try:
        statuses = [
            ComponentStatus(
                component="response cache", ready=configuration.response_cache.ready()
            ),
            ComponentStatus(
                component="search cache", ready=configuration.search_cache.ready()
            ),
        ]
    except LogicError as e:
        logger.error("Failed to check caches readiness: %s", e)
        return [ComponentStatus(component="configuration", ready=False, message=str(e))]

    for name, holder in (
        ("chat provider", AsyncChatClientHolder()),
        ("search provider", AsyncSearchClientHolder()),
    ):
        loaded = holder.is_loaded()
        statuses.append(
            ComponentStatus(
                component=name,
                ready=loaded,
                message=None if loaded else f"{name.capitalize()} client is not initialised",
            )
        )
    return statuses


@router.get("/readiness", responses=get_readiness_responses)
async def readiness_probe_get_method(response: Response) -> ReadinessResponse:
    """
    Handle the readiness probe endpoint, returning service readiness.

    If any component is not ready, responds with HTTP 503 and the list of
    such components; otherwise, indicates the service is ready.
    """
    logger.info("Response to /readiness endpoint")

    not_ready = [c for c in get_components_statuses() if not c.ready]

    if not_ready:
        ready = False
        reason = f"Components not ready: {', '.join(c.component for c in not_ready)}"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        ready = True
        reason = "Service is ready"

    return ReadinessResponse(ready=ready, reason=reason, components=not_ready)


@router.get("/liveness", responses=get_liveness_responses)
async def liveness_probe_get_method() -> LivenessResponse:
    """
    Return the liveness status of the service.

    Returns:
        LivenessResponse: Indicates that the service is alive.
    """
    logger.info("Response to /liveness endpoint")

    return LivenessResponse(alive=True)
