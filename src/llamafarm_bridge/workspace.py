"""Materialize the local Moltbot workspace on first run."""

import json
import os
from pathlib import Path
from typing import Any, Optional

import structlog

from llamafarm_bridge.config import Settings
from llamafarm_bridge.schemas.workspace import WorkspaceBootstrapResult, WorkspaceLayout
from llamafarm_bridge.templates import generate_control_config, render_templates

logger = structlog.get_logger(__name__)


class WorkspaceMaterializer:
    """
    Creates the workspace layout and control-file exactly once.

    The control-file is the idempotency key: once it exists, the directory tree
    belongs to the user and host, and this class never writes to it again.
    """

    def __init__(self, layout: WorkspaceLayout, config: Settings):
        self.layout = layout
        self.config = config

    @classmethod
    def from_settings(cls, config: Settings) -> "WorkspaceMaterializer":
        return cls(WorkspaceLayout.at(config.state_dir), config)

    def exists(self) -> bool:
        return self.layout.config_path.exists()

    def materialize(self) -> WorkspaceBootstrapResult:
        """
        Create directories, template documents and the control-file.

        If the control-file is absent, all documents are written unconditionally,
        overwriting leftovers from an interrupted earlier run. Filesystem errors
        propagate.

        Returns:
            WorkspaceBootstrapResult with created flag and written document names.
        """
        result = WorkspaceBootstrapResult(
            state_dir=self.layout.state_dir,
            workspace_dir=self.layout.workspace_dir,
            memory_dir=self.layout.memory_dir,
            config_path=self.layout.config_path,
        )

        if self.exists():
            logger.debug("Workspace already exists", config_path=str(self.layout.config_path))
            return result

        logger.info("Creating workspace", state_dir=str(self.layout.state_dir))

        self.layout.state_dir.mkdir(parents=True, exist_ok=True)
        self.layout.workspace_dir.mkdir(parents=True, exist_ok=True)
        self.layout.memory_dir.mkdir(parents=True, exist_ok=True)

        for filename, content in render_templates(self.config):
            (self.layout.workspace_dir / filename).write_text(content, encoding="utf-8")
            result.templates_copied.append(filename)

        self._write_control_file(generate_control_config(self.config, self.layout.workspace_dir))
        result.created = True

        logger.info(
            "Workspace created",
            workspace_dir=str(self.layout.workspace_dir),
            templates=len(result.templates_copied),
        )
        return result

    def read_control_config(self) -> Optional[dict[str, Any]]:
        """Load moltbot.json, or None if the workspace has not been created."""
        if not self.exists():
            return None
        return json.loads(self.layout.config_path.read_text(encoding="utf-8"))

    def _write_control_file(self, data: dict[str, Any]) -> None:
        # Rename into place so a failed write never leaves a control-file behind
        tmp_path = self.layout.config_path.with_name(self.layout.config_path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.layout.config_path)
