"""The fixed project configuration this bridge maintains on the model server."""

from llamafarm_bridge.schemas.project import (
    ProjectConfig,
    ProjectIdentity,
    Prompt,
    PromptMessage,
    RuntimeConfig,
    RuntimeModel,
)

# Starter template passed to the create endpoint before the real config is applied
CREATE_TEMPLATE = "default"

RUNTIME_PROVIDER = "universal"
RUNTIME_MODEL = "unsloth/Qwen3-1.7B-GGUF:Q4_K_M"
TOOL_CALL_STRATEGY = "native_api"

DEFAULT_PROMPT_NAME = "default"
# Server-side template: {{variable | fallback}}
SYSTEM_PROMPT_VARIABLE = "system_prompt"
SYSTEM_PROMPT_TEMPLATE = "{{" + SYSTEM_PROMPT_VARIABLE + " | You are a helpful AI assistant.}}"


def build_desired_config(identity: ProjectIdentity, model_name: str) -> ProjectConfig:
    """
    Build the desired project configuration for the agent.

    RAG is left out of the config; chat requests disable it per request instead.
    """
    return ProjectConfig(
        version="v1",
        name=identity.project,
        namespace=identity.namespace,
        runtime=RuntimeConfig(
            models=[
                RuntimeModel(
                    name=model_name,
                    provider=RUNTIME_PROVIDER,
                    model=RUNTIME_MODEL,
                    default=True,
                    prompts=[DEFAULT_PROMPT_NAME],
                    tool_call_strategy=TOOL_CALL_STRATEGY,
                )
            ]
        ),
        prompts=[
            Prompt(
                name=DEFAULT_PROMPT_NAME,
                messages=[PromptMessage(role="system", content=SYSTEM_PROMPT_TEMPLATE)],
            )
        ],
    )
