"""Handler for REST API call to provide info."""

import logging
from typing import Any

from fastapi import APIRouter

from configuration import configuration
from models.responses import InfoResponse
from version import __version__

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["info"])


get_info_responses: dict[int | str, dict[str, Any]] = {
    200: InfoResponse.openapi_response(),
}


@router.get("/info", responses=get_info_responses)
async def info_endpoint_handler() -> InfoResponse:
    """
    Handle request to the /info endpoint.

    Returns:
        InfoResponse: The service name, its version and the chat model in use.
    """
    logger.info("Response to /v1/info endpoint")

    return InfoResponse(
        name=configuration.configuration.name,
        service_version=__version__,
        model=configuration.chat_provider_configuration.model,
    )
