"""Project schemas mirroring the model server's project API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectIdentity(BaseModel):
    """A (namespace, project) pair identifying one project on a server."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    project: str

    @field_validator("namespace", "project")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    def __str__(self) -> str:
        return f"{self.namespace}/{self.project}"


# --- Project configuration (llamafarm.yaml structure) ---


class PromptMessage(BaseModel):
    """One role/content message inside a named prompt."""

    role: str
    content: str


class Prompt(BaseModel):
    """A named prompt: an ordered list of messages."""

    name: str
    messages: list[PromptMessage] = Field(default_factory=list)


class RuntimeModel(BaseModel):
    """Runtime model descriptor inside a project config."""

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    name: str
    provider: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    default: Optional[bool] = None
    prompts: list[str] = Field(default_factory=list)
    tool_call_strategy: Optional[str] = None


class RuntimeConfig(BaseModel):
    """Runtime section of a project config."""

    model_config = ConfigDict(extra="allow")

    models: list[RuntimeModel] = Field(default_factory=list)


class RagConfig(BaseModel):
    """RAG section of a project config."""

    model_config = ConfigDict(extra="allow")

    enabled: Optional[bool] = None


class ProjectConfig(BaseModel):
    """
    Project configuration as stored by the model server.

    Fields the server adds on its own (datasets, schema versions, ...) are kept
    as extras so a fetched config survives a round trip unchanged.
    """

    model_config = ConfigDict(extra="allow")

    version: Optional[str] = None
    name: str
    namespace: str
    runtime: Optional[RuntimeConfig] = None
    prompts: list[Prompt] = Field(default_factory=list)
    rag: Optional[RagConfig] = None


# --- API payloads ---


class ProjectRecord(BaseModel):
    """A project as returned by get/create/update calls."""

    model_config = ConfigDict(extra="allow")

    namespace: str
    name: str
    config: ProjectConfig


class ProjectSummary(BaseModel):
    """
    A project entry in a namespace listing.

    Membership is decided by name alone, so configs of other projects in the
    namespace are kept as raw data and not validated.
    """

    model_config = ConfigDict(extra="allow")

    namespace: Optional[str] = None
    name: str
    config: dict[str, Any] = Field(default_factory=dict)


class ProjectListResponse(BaseModel):
    """Response of GET /v1/projects/{namespace}."""

    total: int = 0
    projects: list[ProjectSummary] = Field(default_factory=list)

    def has_project(self, name: str) -> bool:
        return any(p.name == name for p in self.projects)


class ProjectResponse(BaseModel):
    """Response of project create/get/update calls."""

    model_config = ConfigDict(extra="allow")

    project: ProjectRecord


class CreateProjectRequest(BaseModel):
    """Body of POST /v1/projects/{namespace}."""

    name: str
    config_template: Optional[str] = None


class UpdateProjectRequest(BaseModel):
    """Body of PUT /v1/projects/{namespace}/{project}."""

    config: ProjectConfig


# --- Reconciliation ---


class ReconciliationResult(BaseModel):
    """Outcome of one reconciliation call. Returned, never persisted."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    project: str
    created: bool = False
    server_healthy: bool = False
    config: Optional[ProjectConfig] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.server_healthy and self.error is None
