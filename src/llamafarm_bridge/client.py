"""HTTP client for the LlamaFarm model server API."""

from typing import Any, Optional, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from llamafarm_bridge.config import Settings, get_settings
from llamafarm_bridge.endpoints import build_chat_endpoint, normalize_base_url
from llamafarm_bridge.schemas.chat import ChatRequest, ChatResponse
from llamafarm_bridge.schemas.health import HealthResponse
from llamafarm_bridge.schemas.project import (
    CreateProjectRequest,
    ProjectConfig,
    ProjectIdentity,
    ProjectListResponse,
    ProjectResponse,
    UpdateProjectRequest,
)

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class TransportError(Exception):
    """A request to the model server failed (connection error, non-2xx, or bad payload)."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class LlamaFarmClient:
    """
    Thin client for one project on a LlamaFarm server.

    Every method is a single request/response round trip. There is no retry and
    no caching; callers decide their own retry policy.
    """

    def __init__(
        self,
        server_url: Optional[str] = None,
        namespace: Optional[str] = None,
        project: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            server_url: Server base URL (default: settings.server_url)
            namespace: Project namespace (default: settings.namespace)
            project: Project name (default: settings.project)
            timeout: Per-request timeout in seconds (default: settings.request_timeout)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        if server_url is None or namespace is None or project is None or timeout is None:
            defaults = get_settings()
            server_url = server_url or defaults.server_url
            namespace = namespace or defaults.namespace
            project = project or defaults.project
            timeout = timeout if timeout is not None else defaults.request_timeout

        self.server_url = normalize_base_url(server_url)
        self.identity = ProjectIdentity(namespace=namespace, project=project)
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, config: Settings, transport: Optional[httpx.BaseTransport] = None
    ) -> "LlamaFarmClient":
        return cls(
            server_url=config.server_url,
            namespace=config.namespace,
            project=config.project,
            timeout=config.request_timeout,
            transport=transport,
        )

    @property
    def namespace(self) -> str:
        return self.identity.namespace

    @property
    def project(self) -> str:
        return self.identity.project

    @property
    def project_url(self) -> str:
        return build_chat_endpoint(self.server_url, self.namespace, self.project)

    @property
    def chat_endpoint(self) -> str:
        return f"{self.project_url}/chat/completions"

    # --- Health ---

    def health(self) -> HealthResponse:
        """Fetch the server health payload."""
        response = self._request("Health check", "GET", f"{self.server_url}/health")
        return self._parse("Health check", response, HealthResponse)

    def is_healthy(self) -> bool:
        """True only if the server is reachable and reports status "healthy"."""
        try:
            return self.health().is_healthy
        except TransportError as e:
            logger.debug("Health check failed", server_url=self.server_url, error=str(e))
            return False

    # --- Projects ---

    def list_projects(self) -> ProjectListResponse:
        """List all projects in the namespace."""
        response = self._request("List projects", "GET", self._namespace_url)
        return self._parse("List projects", response, ProjectListResponse)

    def project_exists(self) -> bool:
        """
        Check whether the project is listed in its namespace.

        Any failure is reported as "does not exist"; the caller's next step
        (create) is safe to attempt either way.
        """
        try:
            return self.list_projects().has_project(self.project)
        except TransportError as e:
            logger.debug("Project existence check failed", project=str(self.identity), error=str(e))
            return False

    def get_project(self) -> ProjectResponse:
        """Fetch the project payload."""
        response = self._request("Get project", "GET", self.project_url)
        return self._parse("Get project", response, ProjectResponse)

    def create_project(self, name: Optional[str] = None, config_template: Optional[str] = None) -> ProjectResponse:
        """
        Create a project from a named starter template.

        Fails with TransportError if the project already exists.
        """
        body = CreateProjectRequest(name=name or self.project, config_template=config_template)
        response = self._request(
            "Create project",
            "POST",
            self._namespace_url,
            json_body=body.model_dump(exclude_none=True),
        )
        return self._parse("Create project", response, ProjectResponse)

    def update_project(self, config: ProjectConfig) -> ProjectResponse:
        """Replace the project configuration."""
        body = UpdateProjectRequest(config=config)
        response = self._request(
            "Update project",
            "PUT",
            self.project_url,
            json_body=body.model_dump(mode="json", exclude_none=True),
        )
        return self._parse("Update project", response, ProjectResponse)

    def list_models(self) -> list[str]:
        """List model names available to the project."""
        response = self._request("List models", "GET", f"{self.project_url}/models")
        data = self._json("List models", response)
        models = data.get("models") if isinstance(data, dict) else None
        return [str(m) for m in models or []]

    # --- Chat ---

    def chat(self, request: ChatRequest) -> ChatResponse:
        """Send a chat completion request."""
        response = self._request(
            "Chat request",
            "POST",
            self.chat_endpoint,
            json_body=request.model_dump(exclude_none=True),
        )
        return self._parse("Chat request", response, ChatResponse)

    # --- Internals ---

    @property
    def _namespace_url(self) -> str:
        return f"{self.server_url}/v1/projects/{self.namespace}"

    def _request(
        self,
        operation: str,
        method: str,
        url: str,
        json_body: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, json=json_body)
        except httpx.HTTPError as e:
            raise TransportError(operation, f"{operation} failed: {e}") from e

        logger.debug(
            "Model server request",
            operation=operation,
            method=method,
            url=url,
            status=response.status_code,
        )

        if not response.is_success:
            body = response.text
            message = f"{operation} failed: {response.status_code} {response.reason_phrase}"
            if body:
                message = f"{message} - {body}"
            raise TransportError(operation, message, status_code=response.status_code, body=body)

        return response

    def _json(self, operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                operation,
                f"{operation} failed: invalid JSON response",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _parse(self, operation: str, response: httpx.Response, model: type[M]) -> M:
        data = self._json(operation, response)
        try:
            return model.model_validate(data)
        except ValueError as e:
            raise TransportError(
                operation,
                f"{operation} failed: unexpected response payload ({e})",
                status_code=response.status_code,
                body=response.text,
            ) from e
