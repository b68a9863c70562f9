"""Chat completion schemas (OpenAI-compatible, plus LlamaFarm extensions)."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

VariableValue = Union[str, int, float, bool, None]


class ChatMessage(BaseModel):
    """A single chat message."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Body of POST .../chat/completions."""

    messages: list[ChatMessage]
    stream: bool = False
    temperature: float = 0.7
    max_tokens: int = 1000
    rag_enabled: bool = False
    variables: Optional[dict[str, VariableValue]] = None
    tools: Optional[list[dict[str, Any]]] = None


class ChatOptions(BaseModel):
    """Caller options for building a chat request."""

    system_prompt: Optional[str] = None
    stream: Optional[bool] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    variables: dict[str, VariableValue] = Field(default_factory=dict)
    tools: Optional[list[dict[str, Any]]] = None


class ChatResponseMessage(BaseModel):
    """
    Assistant message in a completion choice.

    Content is null when the model answers with tool calls instead of text.
    """

    model_config = ConfigDict(extra="allow")

    role: str = "assistant"
    content: Optional[str] = None
    tool_calls: Optional[list[dict[str, Any]]] = None


class ChatChoice(BaseModel):
    """One completion choice."""

    model_config = ConfigDict(extra="allow")

    index: int
    message: ChatResponseMessage
    finish_reason: Optional[str] = None


class ChatUsage(BaseModel):
    """Token usage counts."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatResponse(BaseModel):
    """Chat completion response."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: list[ChatChoice] = Field(default_factory=list)
    usage: Optional[ChatUsage] = None

    @property
    def content(self) -> Optional[str]:
        """Text of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message.content
