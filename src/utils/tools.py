"""Tools offered to the model and dispatching of the tool calls it makes."""

import json
import logging
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel

import constants
from models.chat import Message, ToolCall
from utils.web_search import WebSearchAdapter

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[str]]

WEB_SEARCH_TOOL: dict[str, Any] = {
    "type": constants.TOOL_TYPE_FUNCTION,
    "function": {
        "name": constants.WEB_SEARCH_TOOL_NAME,
        "description": "Search the web for current information",
        "parameters": {
            "type": "object",
            "properties": {
                "query": {"type": "string"},
            },
            "required": ["query"],
        },
    },
}


class WebSearchArguments(BaseModel):
    """Arguments of the webSearch tool."""

    query: str


class ToolDispatcher:
    """Dispatch tool calls to the handlers of the known tools.

    Tool calls that are not of function type, or that name a function that
    is not registered, are inert: they produce no tool message and no error.
    """

    def __init__(self, handlers: dict[str, ToolHandler]) -> None:
        """Initialize the dispatcher with handlers keyed by function name."""
        self._handlers = handlers

    @property
    def tool_names(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._handlers)

    async def dispatch(self, tool_call: ToolCall) -> Optional[Message]:
        """Run one tool call.

        Parameters:
            tool_call (ToolCall): Tool call requested by the model.

        Returns:
            Optional[Message]: Tool result message answering the call, or None
            when the call is skipped.

        Raises:
            json.JSONDecodeError: If the arguments are not valid JSON.
            pydantic.ValidationError: If the arguments do not match the tool.
        """
        if tool_call.type != constants.TOOL_TYPE_FUNCTION:
            logger.debug("Skipping tool call %s of type %s", tool_call.id, tool_call.type)
            return None

        handler = self._handlers.get(tool_call.function.name)
        if handler is None:
            logger.debug(
                "Skipping tool call %s to unknown function %s",
                tool_call.id,
                tool_call.function.name,
            )
            return None

        arguments = json.loads(tool_call.function.arguments)
        logger.info("Calling tool %s", tool_call.function.name)
        content = await handler(arguments)
        return Message(
            role=constants.ROLE_TOOL,
            tool_call_id=tool_call.id,
            name=tool_call.function.name,
            content=content,
        )


def create_tool_dispatcher(web_search: WebSearchAdapter) -> ToolDispatcher:
    """Create a dispatcher that knows the webSearch tool.

    Parameters:
        web_search (WebSearchAdapter): Adapter used to answer webSearch calls.

    Returns:
        ToolDispatcher: Dispatcher with the webSearch handler registered.
    """

    async def run_web_search(arguments: dict[str, Any]) -> str:
        args = WebSearchArguments.model_validate(arguments)
        return await web_search.search(args.query)

    return ToolDispatcher({constants.WEB_SEARCH_TOOL_NAME: run_web_search})
