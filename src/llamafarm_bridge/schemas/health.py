"""Model server health payload."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthComponent(BaseModel):
    """Status of one server component (runtime, storage, ...)."""

    model_config = ConfigDict(extra="allow")

    name: str
    status: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Response of GET /health."""

    model_config = ConfigDict(extra="allow")

    status: str  # healthy, unhealthy
    summary: Optional[str] = None
    components: list[HealthComponent] = Field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        return self.status == "healthy"
