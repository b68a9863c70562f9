"""Interfaces of the agent host that loads this plugin."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from pydantic import BaseModel, Field


class HostLogger(Protocol):
    def info(self, message: str) -> Any: ...

    def warning(self, message: str) -> Any: ...


class Prompter(Protocol):
    """Interactive prompt used while collecting provider credentials."""

    def text(
        self,
        message: str,
        initial_value: str = "",
        validate: Optional[Callable[[str], Optional[str]]] = None,
    ) -> str: ...


class ProviderAuthContext(Protocol):
    prompter: Prompter


class ServiceContext(Protocol):
    logger: HostLogger


class AuthProfile(BaseModel):
    """Credential profile handed back to the host."""

    profile_id: str
    credential: dict[str, Any]


class ProviderAuthResult(BaseModel):
    """Outcome of an interactive provider setup."""

    profiles: list[AuthProfile] = Field(default_factory=list)
    config_patch: dict[str, Any] = Field(default_factory=dict)
    default_model: str
    notes: list[str] = Field(default_factory=list)


@dataclass
class ProviderAuthMethod:
    id: str
    label: str
    hint: str
    kind: str
    run: Callable[[ProviderAuthContext], ProviderAuthResult]


@dataclass
class ProviderPlugin:
    id: str
    label: str
    docs_path: str
    aliases: list[str] = field(default_factory=list)
    auth: list[ProviderAuthMethod] = field(default_factory=list)


@dataclass
class PluginService:
    id: str
    start: Callable[[ServiceContext], None]
    stop: Optional[Callable[[ServiceContext], None]] = None


class PluginApi(Protocol):
    """What the host exposes to a plugin at registration time."""

    plugin_config: Optional[dict[str, Any]]
    logger: HostLogger

    def register_service(self, service: PluginService) -> None: ...

    def on(self, event: str, handler: Callable[..., Any]) -> None: ...

    def register_provider(self, provider: ProviderPlugin) -> None: ...
