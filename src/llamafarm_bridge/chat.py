"""Chat request construction with the agent's fixed defaults."""

from typing import Any, Optional, Sequence, Union

import structlog

from llamafarm_bridge.client import LlamaFarmClient
from llamafarm_bridge.project_template import SYSTEM_PROMPT_VARIABLE
from llamafarm_bridge.schemas.chat import ChatMessage, ChatOptions, ChatRequest, ChatResponse

logger = structlog.get_logger(__name__)

DEFAULT_STREAM = False
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000

MessageLike = Union[ChatMessage, dict[str, Any]]


def build_chat_request(
    messages: Sequence[MessageLike],
    options: Optional[ChatOptions] = None,
) -> ChatRequest:
    """
    Build a chat request from messages and caller options.

    RAG is always disabled on this path, whatever the project config says.
    A system prompt override goes into the request variables for server-side
    template substitution; it is never inserted into the message list.

    Args:
        messages: Chat messages (ChatMessage or {"role": ..., "content": ...} dicts)
        options: Optional overrides

    Returns:
        ChatRequest ready to send.
    """
    options = options or ChatOptions()

    variables = dict(options.variables)
    if options.system_prompt:
        variables[SYSTEM_PROMPT_VARIABLE] = options.system_prompt

    return ChatRequest(
        messages=[ChatMessage.model_validate(m) for m in messages],
        stream=options.stream if options.stream is not None else DEFAULT_STREAM,
        temperature=options.temperature if options.temperature is not None else DEFAULT_TEMPERATURE,
        max_tokens=options.max_tokens if options.max_tokens is not None else DEFAULT_MAX_TOKENS,
        rag_enabled=False,
        variables=variables or None,
        tools=options.tools,
    )


def chat_with_defaults(
    client: LlamaFarmClient,
    messages: Sequence[MessageLike],
    options: Optional[ChatOptions] = None,
) -> ChatResponse:
    """
    Send a chat completion with the agent defaults.

    Raises:
        TransportError: If the request fails; the server's error body is kept.
    """
    request = build_chat_request(messages, options)
    response = client.chat(request)
    logger.debug(
        "Chat completion received",
        project=str(client.identity),
        turns=len(request.messages),
        choices=len(response.choices),
    )
    return response
