"""Shared fixtures: an in-memory LlamaFarm server behind httpx.MockTransport."""

import json

import httpx
import pytest

from llamafarm_bridge.client import LlamaFarmClient
from llamafarm_bridge.config import Settings

SERVER_URL = "http://llamafarm.test"


class FakeModelServer:
    """Implements the subset of the LlamaFarm HTTP API the bridge uses."""

    def __init__(self, healthy: bool = True):
        self.healthy = healthy
        self.projects: dict[tuple[str, str], dict] = {}
        self.requests: list[tuple[str, str]] = []
        self.chat_bodies: list[dict] = []
        # (method, path) -> (status, body) overrides
        self.failures: dict[tuple[str, str], tuple[int, str]] = {}

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def add_project(self, namespace: str, name: str, config: dict | None = None) -> None:
        self.projects[(namespace, name)] = config or {"name": name, "namespace": namespace, "version": "v1"}

    def calls(self, method: str) -> list[str]:
        return [path for m, path in self.requests if m == method]

    def handle(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        self.requests.append((method, path))

        if (method, path) in self.failures:
            status, body = self.failures[(method, path)]
            return httpx.Response(status, text=body)

        if path == "/health":
            return httpx.Response(
                200,
                json={
                    "status": "healthy" if self.healthy else "unhealthy",
                    "summary": "ok" if self.healthy else "runtime down",
                    "components": [{"name": "runtime", "status": "ok" if self.healthy else "error"}],
                },
            )

        parts = path.strip("/").split("/")
        if parts[:2] != ["v1", "projects"] or len(parts) < 3:
            return httpx.Response(404, json={"detail": "Not Found"})

        namespace = parts[2]
        if len(parts) == 3:
            if method == "GET":
                return self._list(namespace)
            if method == "POST":
                return self._create(namespace, json.loads(request.content))

        key = (namespace, parts[3])
        rest = parts[4:]
        if key not in self.projects:
            return httpx.Response(404, json={"detail": f"Project {namespace}/{parts[3]} not found"})

        if not rest and method == "GET":
            return self._project(key)
        if not rest and method == "PUT":
            self.projects[key] = json.loads(request.content)["config"]
            return self._project(key)
        if rest == ["models"] and method == "GET":
            runtime = self.projects[key].get("runtime") or {}
            return httpx.Response(200, json={"models": [m["name"] for m in runtime.get("models", [])]})
        if rest == ["chat", "completions"] and method == "POST":
            body = json.loads(request.content)
            self.chat_bodies.append(body)
            return httpx.Response(
                200,
                json={
                    "id": "chatcmpl-1",
                    "object": "chat.completion",
                    "created": 1769731200,
                    "model": "qwen3-8b",
                    "choices": [
                        {
                            "index": 0,
                            "message": {"role": "assistant", "content": "Hello from LlamaFarm"},
                            "finish_reason": "stop",
                        }
                    ],
                    "usage": {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16},
                },
            )

        return httpx.Response(405, json={"detail": "Method Not Allowed"})

    def _list(self, namespace: str) -> httpx.Response:
        projects = [
            {"namespace": ns, "name": name, "config": config}
            for (ns, name), config in self.projects.items()
            if ns == namespace
        ]
        return httpx.Response(200, json={"total": len(projects), "projects": projects})

    def _create(self, namespace: str, body: dict) -> httpx.Response:
        key = (namespace, body["name"])
        if key in self.projects:
            return httpx.Response(409, text=f"Project {namespace}/{body['name']} already exists")
        self.add_project(namespace, body["name"])
        return self._project(key)

    def _project(self, key: tuple[str, str]) -> httpx.Response:
        namespace, name = key
        return httpx.Response(
            200,
            json={"project": {"namespace": namespace, "name": name, "config": self.projects[key]}},
        )


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def server() -> FakeModelServer:
    return FakeModelServer()


@pytest.fixture
def client(server: FakeModelServer) -> LlamaFarmClient:
    return LlamaFarmClient(
        server_url=SERVER_URL,
        namespace="moltbot",
        project="agent",
        transport=server.transport(),
    )


@pytest.fixture
def offline_transport() -> httpx.MockTransport:
    return httpx.MockTransport(_refuse)


@pytest.fixture
def offline_client(offline_transport: httpx.MockTransport) -> LlamaFarmClient:
    return LlamaFarmClient(
        server_url=SERVER_URL,
        namespace="moltbot",
        project="agent",
        transport=offline_transport,
    )


@pytest.fixture
def bridge_settings(tmp_path) -> Settings:
    return Settings(
        server_url=SERVER_URL,
        namespace="moltbot",
        project="agent",
        model_name="qwen3-8b",
        state_dir=tmp_path / "state",
        log_dir=tmp_path / "logs",
    )
