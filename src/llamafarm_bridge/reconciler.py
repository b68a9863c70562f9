"""Bring the remote project into agreement with the desired configuration."""

from typing import Optional

import structlog

from llamafarm_bridge.client import LlamaFarmClient, TransportError
from llamafarm_bridge.project_template import CREATE_TEMPLATE, build_desired_config
from llamafarm_bridge.schemas.project import ProjectConfig, ProjectResponse, ReconciliationResult

logger = structlog.get_logger(__name__)


class ProjectReconciler:
    """
    Create-or-update reconciliation of one project.

    Nothing is cached between calls: every call re-reads the live server, which
    may have been edited out of band.

    Steps:
    1. Check health (short-circuit if unreachable or unhealthy)
    2. Record whether the project existed beforehand
    3. Ensure: create from the starter template if absent, then update
    4. Report the outcome as a ReconciliationResult
    """

    def __init__(self, client: LlamaFarmClient, model_name: str):
        self.client = client
        self.model_name = model_name

    @property
    def desired_config(self) -> ProjectConfig:
        return build_desired_config(self.client.identity, self.model_name)

    def reconcile(self) -> ReconciliationResult:
        """
        Run one reconciliation pass.

        Never raises for server-side failures; they are reported on the result.
        """
        identity = self.client.identity
        log = logger.bind(project=str(identity), server_url=self.client.server_url)

        if not self.client.is_healthy():
            log.warning("Model server not reachable or unhealthy, skipping reconciliation")
            return ReconciliationResult(
                namespace=identity.namespace,
                project=identity.project,
                created=False,
                server_healthy=False,
                error=f"LlamaFarm server not reachable or unhealthy at {self.client.server_url}",
            )

        was_present = self.client.project_exists()

        try:
            response = self.ensure_project()
        except TransportError as e:
            log.warning("Project reconciliation failed", error=str(e), status=e.status_code)
            return ReconciliationResult(
                namespace=identity.namespace,
                project=identity.project,
                created=False,
                server_healthy=True,
                error=str(e),
            )

        log.info("Project reconciled", created=not was_present)
        return ReconciliationResult(
            namespace=identity.namespace,
            project=identity.project,
            created=not was_present,
            server_healthy=True,
            config=response.project.config,
        )

    def ensure_project(self) -> ProjectResponse:
        """
        Create the project if absent, then apply the desired config.

        The create endpoint only accepts a starter template name, so a new
        project is always followed by a full update. A create that fails (for
        instance because another caller created the project first) propagates.

        Raises:
            TransportError: If any create/update call fails
        """
        config = self.desired_config

        if self.client.project_exists():
            logger.debug("Project exists, updating", project=str(self.client.identity))
            return self.client.update_project(config)

        logger.info("Creating project", project=str(self.client.identity), template=CREATE_TEMPLATE)
        self.client.create_project(self.client.project, CREATE_TEMPLATE)
        return self.client.update_project(config)

    def get_project_config(self) -> Optional[ProjectConfig]:
        """Return the remote config, or None if the project is absent or the server unreachable."""
        try:
            if not self.client.project_exists():
                return None
            return self.client.get_project().project.config
        except TransportError as e:
            logger.debug("Could not fetch project config", project=str(self.client.identity), error=str(e))
            return None

    def project_exists(self) -> bool:
        return self.client.project_exists()
