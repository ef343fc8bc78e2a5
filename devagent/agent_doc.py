"""Parsing of agent markdown documents into Agent objects."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from devagent.agent import Agent, AgentConfig, PartKind, PromptPart
from devagent.errors import DevaiError


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into a dictionary, raising DevaiError when it is invalid."""
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise DevaiError(f"Invalid TOML: {exc}") from exc


class _CaptureMode(Enum):
    NONE = auto()
    BEFORE_ALL_SECTION = auto()
    BEFORE_ALL_CODE_BLOCK = auto()
    CONFIG_SECTION = auto()
    CONFIG_TOML_BLOCK = auto()
    DATA_SECTION = auto()
    DATA_CODE_BLOCK = auto()
    PROMPT_PART = auto()
    OUTPUT_SECTION = auto()
    OUTPUT_CODE_BLOCK = auto()
    AFTER_ALL_SECTION = auto()
    AFTER_ALL_CODE_BLOCK = auto()


_SECTION_MODES = {
    "config": _CaptureMode.CONFIG_SECTION,
    "before all": _CaptureMode.BEFORE_ALL_SECTION,
    "data": _CaptureMode.DATA_SECTION,
    "output": _CaptureMode.OUTPUT_SECTION,
    "after all": _CaptureMode.AFTER_ALL_SECTION,
}

# section mode -> (opening fence prefix, code block mode, script key)
_SECTION_BLOCKS = {
    _CaptureMode.CONFIG_SECTION: ("```toml", _CaptureMode.CONFIG_TOML_BLOCK),
    _CaptureMode.BEFORE_ALL_SECTION: ("```lua", _CaptureMode.BEFORE_ALL_CODE_BLOCK),
    _CaptureMode.DATA_SECTION: ("```lua", _CaptureMode.DATA_CODE_BLOCK),
    _CaptureMode.OUTPUT_SECTION: ("```lua", _CaptureMode.OUTPUT_CODE_BLOCK),
    _CaptureMode.AFTER_ALL_SECTION: ("```lua", _CaptureMode.AFTER_ALL_CODE_BLOCK),
}

_CODE_BLOCK_KEYS = {
    _CaptureMode.CONFIG_TOML_BLOCK: "config",
    _CaptureMode.BEFORE_ALL_CODE_BLOCK: "before_all",
    _CaptureMode.DATA_CODE_BLOCK: "data",
    _CaptureMode.OUTPUT_CODE_BLOCK: "output",
    _CaptureMode.AFTER_ALL_CODE_BLOCK: "after_all",
}


def _prompt_part_kind(header: str) -> PartKind | None:
    if header in ("inst", "instruction"):
        return PartKind.INSTRUCTION
    if header == "system":
        return PartKind.SYSTEM
    if header in ("assistant", "model", "mind trick", "jedi trick"):
        return PartKind.ASSISTANT
    return None


def _lines(content: str) -> list[str]:
    parts = content.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _option(text: str) -> str | None:
    return text or None


@dataclass(frozen=True)
class AgentDoc:
    """The raw markdown of an agent file and the path it came from."""

    path: str
    raw_content: str

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> AgentDoc:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        return cls(path=os.fspath(path), raw_content=content)

    def into_agent(self, name: str, config: AgentConfig) -> Agent:
        """Split the document into its sections and build the Agent."""
        mode = _CaptureMode.NONE
        scripts: dict[str, list[str]] = {key: [] for key in _CODE_BLOCK_KEYS.values()}
        prompt_parts: list[PromptPart] = []
        current_part: tuple[PartKind, list[str]] | None = None
        in_block = False

        def finalize() -> None:
            nonlocal current_part
            if current_part is not None:
                kind, lines = current_part
                prompt_parts.append(PromptPart(kind, "\n".join([*lines, ""])))
                current_part = None

        for line in _lines(self.raw_content):
            if line.startswith("```"):
                in_block = not in_block

            if not in_block and line.startswith("#") and not line.startswith("##"):
                header = line[1:].strip().lower()
                if header in _SECTION_MODES:
                    mode = _SECTION_MODES[header]
                elif (kind := _prompt_part_kind(header)) is not None:
                    mode = _CaptureMode.PROMPT_PART
                    finalize()
                    current_part = (kind, [])
                else:
                    mode = _CaptureMode.NONE
                continue

            if mode in _SECTION_BLOCKS:
                fence, block_mode = _SECTION_BLOCKS[mode]
                if line.startswith(fence):
                    mode = block_mode
            elif mode in _CODE_BLOCK_KEYS:
                if line.startswith("```"):
                    mode = _CaptureMode.NONE
                else:
                    scripts[_CODE_BLOCK_KEYS[mode]].append(line + "\n")
            elif mode is _CaptureMode.PROMPT_PART and current_part is not None:
                current_part[1].append(line)

        finalize()

        config_toml = "".join(scripts["config"])
        if config_toml:
            config = config.merge(parse_toml(config_toml))

        return Agent(
            config=config,
            name=name,
            file_name=os.path.basename(self.path.rstrip("/")),
            file_path=self.path,
            before_all_script=_option("".join(scripts["before_all"])),
            prompt_parts=tuple(prompt_parts),
            data_script=_option("".join(scripts["data"])),
            output_script=_option("".join(scripts["output"])),
            after_all_script=_option("".join(scripts["after_all"])),
        )