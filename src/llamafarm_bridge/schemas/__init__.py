"""Schemas for the LlamaFarm bridge."""

from llamafarm_bridge.schemas.chat import (
    ChatChoice,
    ChatMessage,
    ChatOptions,
    ChatResponseMessage,
    ChatRequest,
    ChatResponse,
    ChatUsage,
)
from llamafarm_bridge.schemas.health import HealthComponent, HealthResponse
from llamafarm_bridge.schemas.project import (
    CreateProjectRequest,
    ProjectConfig,
    ProjectIdentity,
    ProjectListResponse,
    ProjectRecord,
    ProjectSummary,
    ProjectResponse,
    Prompt,
    PromptMessage,
    RagConfig,
    ReconciliationResult,
    RuntimeConfig,
    RuntimeModel,
    UpdateProjectRequest,
)
from llamafarm_bridge.schemas.tools import ToolContent, ToolResult
from llamafarm_bridge.schemas.workspace import WorkspaceBootstrapResult, WorkspaceLayout

__all__ = [
    # Chat
    "ChatMessage",
    "ChatRequest",
    "ChatOptions",
    "ChatResponseMessage",
    "ChatChoice",
    "ChatUsage",
    "ChatResponse",
    # Health
    "HealthComponent",
    "HealthResponse",
    # Projects
    "ProjectIdentity",
    "PromptMessage",
    "Prompt",
    "RuntimeModel",
    "RuntimeConfig",
    "RagConfig",
    "ProjectConfig",
    "ProjectRecord",
    "ProjectSummary",
    "ProjectListResponse",
    "ProjectResponse",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "ReconciliationResult",
    # Tools
    "ToolContent",
    "ToolResult",
    # Workspace
    "WorkspaceLayout",
    "WorkspaceBootstrapResult",
]
