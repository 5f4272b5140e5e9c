"""Handler for REST API call to answer a chat conversation."""

import logging
from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import constants
from client import AsyncChatClientHolder, AsyncSearchClientHolder
from configuration import configuration
from models.chat import FinalAnswer, Message
from models.requests import ChatMessage, ChatRequest
from models.responses import ChatResponse, ErrorResponse
from utils.orchestrator import ToolCallingOrchestrator
from utils.tools import create_tool_dispatcher
from utils.web_search import WebSearchAdapter

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["chat"])


chat_responses: dict[int | str, dict[str, Any]] = {
    200: ChatResponse.openapi_response(),
    500: ErrorResponse.openapi_response(),
}


def create_orchestrator() -> ToolCallingOrchestrator:
    """Build the tool-calling orchestrator for one request.

    The orchestrator shares the process-wide search cache and provider
    clients; only its conversation state is request-scoped.

    Returns:
        ToolCallingOrchestrator: Orchestrator configured from the loaded
        configuration.
    """
    chat_provider = configuration.chat_provider_configuration
    search_provider = configuration.search_provider_configuration
    orchestrator_config = configuration.orchestrator_configuration

    web_search = WebSearchAdapter(
        client=AsyncSearchClientHolder().get_client(),
        cache=configuration.search_cache,
        max_results=search_provider.max_results,
        timeout=search_provider.timeout,
    )
    return ToolCallingOrchestrator(
        AsyncChatClientHolder().get_client(),
        create_tool_dispatcher(web_search),
        model=chat_provider.model,
        temperature=chat_provider.temperature,
        system_prompt=orchestrator_config.effective_system_prompt,
        max_iterations=orchestrator_config.max_iterations,
    )


async def answer_conversation(messages: list[ChatMessage]) -> FinalAnswer:
    """Run the tool-calling loop for the caller's conversation.

    Parameters:
        messages (list[ChatMessage]): Conversation sent by the UI.

    Returns:
        FinalAnswer: Final assistant answer.
    """
    orchestrator = create_orchestrator()
    return await orchestrator.run(
        [Message(role=message.role, content=message.content) for message in messages]
    )


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses=chat_responses,
)
async def chat_endpoint_handler(
    chat_request: ChatRequest,
) -> ChatResponse | JSONResponse:
    """
    Handle request to the /chat endpoint.

    The response cache is consulted first using the serialized messages as
    key; on a hit the cached answer is returned without calling the model.
    On a miss the tool-calling loop produces the answer, which is cached
    and returned.

    Any failure is reported as `{"error": message}` with status 500 and
    nothing is cached for it. An invalid request body is reported the same
    way by the validation error handler registered on the application.

    Returns:
        ChatResponse: The assistant's final answer.
    """
    try:
        cache_key = chat_request.cache_key()
        response_cache = configuration.response_cache

        cached_content = response_cache.get(cache_key)
        if cached_content is not None:
            logger.info("Chat cache hit")
            return ChatResponse(content=cached_content)

        logger.info(
            "Chat cache miss, answering conversation of %d message(s)",
            len(chat_request.messages),
        )
        answer = await answer_conversation(chat_request.messages)

        response_cache.set(cache_key, answer.content)
        return ChatResponse(role=constants.ROLE_ASSISTANT, content=answer.content)

    except Exception as e:  # pylint: disable=broad-except
        logger.exception("Error in chat endpoint handler: %s", e)
        response = ErrorResponse.from_exception(e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump(),
        )
