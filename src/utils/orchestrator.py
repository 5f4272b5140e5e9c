"""Tool-calling loop against the chat completion API."""

import logging
from enum import Enum
from typing import Any

import constants
from models.chat import FinalAnswer, Message, ToolCall
from utils.tools import WEB_SEARCH_TOOL, ToolDispatcher

logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    """States of the tool-calling loop."""

    AWAITING_MODEL = "awaiting_model"
    DISPATCHING_TOOLS = "dispatching_tools"
    DONE = "done"
    FAILED = "failed"


class ToolLoopLimitExceededError(RuntimeError):
    """The model kept requesting tools beyond the allowed number of iterations."""

    def __init__(self, max_iterations: int) -> None:
        """Initialize the error with the exhausted iteration limit."""
        super().__init__(
            f"Tool-calling loop did not finish within {max_iterations} iterations"
        )
        self.max_iterations = max_iterations


class ToolCallingOrchestrator:
    """Drive the conversation with the model until it produces a final answer.

    One instance serves one request. The system prompt is prepended to the
    caller's messages, then the model is asked for a completion. When the
    model requests tools, its turn and one tool message per dispatched call
    are appended to the conversation and the model is asked again. Each
    completion call counts as one iteration; exceeding `max_iterations`
    moves the loop to the FAILED state.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        client: Any,
        dispatcher: ToolDispatcher,
        *,
        model: str = constants.DEFAULT_CHAT_MODEL,
        temperature: float = constants.DEFAULT_TEMPERATURE,
        system_prompt: str = constants.DEFAULT_SYSTEM_PROMPT,
        max_iterations: int = constants.DEFAULT_MAX_ITERATIONS,
    ) -> None:
        """Initialize the orchestrator.

        Parameters:
            client: AsyncOpenAI client (or compatible) used for completions.
            dispatcher: Dispatcher running the tool calls.
            model: Model identifier sent with each completion request.
            temperature: Sampling temperature sent with each completion request.
            system_prompt: Text of the system message opening the conversation.
            max_iterations: Maximum number of completion calls.
        """
        self.client = client
        self.dispatcher = dispatcher
        self.model = model
        self.temperature = temperature
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.state = OrchestratorState.AWAITING_MODEL
        self.iterations = 0
        self.conversation: list[Message] = []

    async def run(self, initial_messages: list[Message]) -> FinalAnswer:
        """Run the loop and return the model's final answer.

        Parameters:
            initial_messages (list[Message]): Caller's conversation, without
            the system prompt.

        Returns:
            FinalAnswer: Content of the first assistant message carrying no
            tool calls.

        Raises:
            ToolLoopLimitExceededError: If no final answer is produced within
            `max_iterations` completion calls.
            Exception: Any provider or tool argument error, unchanged.
        """
        self.conversation = [
            Message(role=constants.ROLE_SYSTEM, content=self.system_prompt),
            *initial_messages,
        ]
        self.state = OrchestratorState.AWAITING_MODEL
        self.iterations = 0
        try:
            while True:
                if self.iterations >= self.max_iterations:
                    raise ToolLoopLimitExceededError(self.max_iterations)
                self.iterations += 1
                message = await self._complete()

                tool_calls = [
                    ToolCall.from_provider(tool_call)
                    for tool_call in message.tool_calls or []
                ]
                if not tool_calls:
                    self.state = OrchestratorState.DONE
                    logger.info(
                        "Final answer produced after %d iteration(s)", self.iterations
                    )
                    return FinalAnswer(content=message.content or "")

                self.state = OrchestratorState.DISPATCHING_TOOLS
                await self._dispatch_tools(message.content, tool_calls)
                self.state = OrchestratorState.AWAITING_MODEL
        except Exception:
            self.state = OrchestratorState.FAILED
            raise

    async def _complete(self) -> Any:
        """Ask the model for the next assistant message."""
        logger.debug(
            "Calling chat completion API, iteration %d, %d messages",
            self.iterations,
            len(self.conversation),
        )
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=[message.to_provider() for message in self.conversation],
            tools=[WEB_SEARCH_TOOL],
            tool_choice=constants.TOOL_CHOICE_AUTO,
        )
        return response.choices[0].message

    async def _dispatch_tools(
        self, content: str | None, tool_calls: list[ToolCall]
    ) -> None:
        """Append the assistant turn and the results of its tool calls.

        Every tool call carried by the appended assistant turn has to be
        answered by a tool message, so skipped calls are left out of it. When
        no call was dispatched, only non-empty assistant text is kept.
        """
        dispatched: list[ToolCall] = []
        results: list[Message] = []
        # results must follow the order in which the calls were issued
        for tool_call in tool_calls:
            result = await self.dispatcher.dispatch(tool_call)
            if result is not None:
                dispatched.append(tool_call)
                results.append(result)

        if dispatched:
            self.conversation.append(
                Message(
                    role=constants.ROLE_ASSISTANT,
                    content=content,
                    tool_calls=dispatched,
                )
            )
        elif content:
            self.conversation.append(
                Message(role=constants.ROLE_ASSISTANT, content=content)
            )
        self.conversation.extend(results)
