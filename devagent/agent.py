"""Agent definitions: configuration, prompt parts and the agent itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from devagent.errors import ModelMissingError


class PartKind(Enum):
    INSTRUCTION = "instruction"
    SYSTEM = "system"
    ASSISTANT = "assistant"

    def chat_role(self) -> str:
        """The chat role a prompt part of this kind is sent as."""
        return {
            PartKind.INSTRUCTION: "user",
            PartKind.SYSTEM: "system",
            PartKind.ASSISTANT: "assistant",
        }[self]


@dataclass(frozen=True)
class PromptPart:
    kind: PartKind
    content: str


def _lookup(value: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]
    return value


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


@dataclass(frozen=True)
class AgentConfig:
    """Agent settings from `.devai/config.toml` or an agent's `# Config` section."""

    model: str | None = None
    temperature: float | None = None
    input_concurrency: int | None = None

    @classmethod
    def from_value(cls, value: Any) -> AgentConfig:
        return cls(
            model=_as_str(_lookup(value, "genai", "model")),
            temperature=_as_float(_lookup(value, "genai", "temperature")),
            input_concurrency=_as_count(_lookup(value, "runtime", "input_concurrency")),
        )

    def merge(self, value: Any) -> AgentConfig:
        """Return a config where the values found in `value` override this one."""
        override = AgentConfig.from_value(value)
        return AgentConfig(
            model=override.model if override.model is not None else self.model,
            temperature=(
                override.temperature if override.temperature is not None else self.temperature
            ),
            input_concurrency=(
                override.input_concurrency
                if override.input_concurrency is not None
                else self.input_concurrency
            ),
        )


@dataclass(frozen=True)
class Agent:
    """A parsed agent ready to run; requires a model in its config."""

    config: AgentConfig
    name: str
    file_name: str
    file_path: str
    before_all_script: str | None = None
    prompt_parts: tuple[PromptPart, ...] = field(default_factory=tuple)
    data_script: str | None = None
    output_script: str | None = None
    after_all_script: str | None = None

    def __post_init__(self) -> None:
        if self.config.model is None:
            raise ModelMissingError(self.file_path)
        object.__setattr__(self, "prompt_parts", tuple(self.prompt_parts))

    @property
    def genai_model(self) -> str:
        return self.config.model  # type: ignore[return-value]

    @property
    def genai_chat_options(self) -> dict[str, float]:
        options: dict[str, float] = {}
        if self.config.temperature is not None:
            options["temperature"] = self.config.temperature
        return options