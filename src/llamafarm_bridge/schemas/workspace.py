"""Schemas for the local Moltbot workspace."""

from pathlib import Path

from pydantic import BaseModel, Field

CONTROL_FILE_NAME = "moltbot.json"


class WorkspaceLayout(BaseModel):
    """Fixed directory layout under a state directory."""

    state_dir: Path

    @classmethod
    def at(cls, state_dir: Path) -> "WorkspaceLayout":
        return cls(state_dir=Path(state_dir).expanduser())

    @property
    def workspace_dir(self) -> Path:
        return self.state_dir / "workspace"

    @property
    def memory_dir(self) -> Path:
        return self.state_dir / "memory"

    @property
    def config_path(self) -> Path:
        return self.state_dir / CONTROL_FILE_NAME


class WorkspaceBootstrapResult(BaseModel):
    """Outcome of a workspace materialization call."""

    state_dir: Path
    workspace_dir: Path
    memory_dir: Path
    config_path: Path
    created: bool = False
    templates_copied: list[str] = Field(default_factory=list)
