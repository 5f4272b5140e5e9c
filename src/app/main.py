"""Definition of FastAPI based web service."""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import constants
from app import routers
from client import AsyncChatClientHolder, AsyncSearchClientHolder
from configuration import configuration
from models.responses import ErrorResponse
from version import __version__

logger = logging.getLogger(__name__)

# uvicorn workers do not share the process context with the entry point,
# so the configuration is read again from the path stored in environment
if not configuration.is_loaded():
    configuration.load_configuration(
        os.environ.get(
            "CHAT_SERVICE_CONFIG_PATH", constants.DEFAULT_CONFIGURATION_FILE
        )
    )

service_name = configuration.configuration.name


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Create provider clients and caches before serving requests.

    Parameters:
        _app (FastAPI): The application being started.
    """
    logger.info("Creating provider clients")
    AsyncChatClientHolder().load(configuration.chat_provider_configuration)
    AsyncSearchClientHolder().load(configuration.search_provider_configuration)

    # make sure both caches exist before the first request arrives
    _ = configuration.response_cache
    _ = configuration.search_cache

    logger.info("App startup complete")
    yield
    await AsyncChatClientHolder().get_client().close()
    logger.info("App shutdown complete")


app = FastAPI(
    title=f"{service_name} service - OpenAPI",
    summary=f"{service_name} service API specification.",
    description=f"{service_name} service API specification.",
    version=__version__,
    servers=[
        {"url": "http://localhost:8080/", "description": "Locally running service"}
    ],
    lifespan=lifespan,
)

cors = configuration.service_configuration.cors

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.allow_origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report an invalid request body with the chat error envelope.

    Parameters:
        _request (Request): The rejected request.
        exc (RequestValidationError): Validation failure raised by FastAPI.

    Returns:
        JSONResponse: `{"error": message}` with status 500.
    """
    logger.error("Invalid request: %s", exc)
    errors = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    response = ErrorResponse(error=f"Invalid request body: {errors}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response.model_dump(),
    )


routers.include_routers(app)
