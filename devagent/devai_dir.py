"""The `.devai/` directory layout under a workspace directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from devagent.dir_context import join_path

DEVAI_DIR_NAME = ".devai"
DEVAI_DIR_PATH = "./.devai"

DEVAI_CONFIG_FILE_PATH = "config.toml"

DEVAI_AGENT_DEFAULT_DIR = "default/command-agent"
DEVAI_AGENT_CUSTOM_DIR = "custom/command-agent"
DEVAI_COMMAND_AGENT_DIRS = (DEVAI_AGENT_CUSTOM_DIR, DEVAI_AGENT_DEFAULT_DIR)

DEVAI_NEW_CUSTOM_COMMAND_DIR = "custom/new-template/command-agent"
DEVAI_NEW_DEFAULT_COMMAND_DIR = "default/new-template/command-agent"
DEVAI_NEW_COMMAND_DIRS = (DEVAI_NEW_CUSTOM_COMMAND_DIR, DEVAI_NEW_DEFAULT_COMMAND_DIR)

DEVAI_NEW_CUSTOM_SOLO_DIR = "custom/new-template/solo-agent"
DEVAI_NEW_DEFAULT_SOLO_DIR = "default/new-template/solo-agent"
DEVAI_NEW_SOLO_DIRS = (DEVAI_NEW_CUSTOM_SOLO_DIR, DEVAI_NEW_DEFAULT_SOLO_DIR)

DEVAI_DOC_DIR = "doc"


@dataclass(frozen=True)
class DevaiDir:
    """Paths of a `.devai/` directory; dirs lists are ordered by priority."""

    devai_dir: str
    devai_dir_full_path: str
    parent_dir: str

    @classmethod
    def from_parent_dir(cls, parent_dir: str | os.PathLike[str]) -> DevaiDir:
        workspace_dir = os.fspath(parent_dir)
        return cls(
            devai_dir=DEVAI_DIR_PATH,
            devai_dir_full_path=join_path(workspace_dir, DEVAI_DIR_NAME),
            parent_dir=workspace_dir,
        )

    def __fspath__(self) -> str:
        return self.devai_dir_full_path

    def exists(self) -> bool:
        return os.path.exists(self.devai_dir_full_path)

    def _under(self, suffix: str) -> str:
        return join_path(self.devai_dir_full_path, suffix)

    def get_config_toml_path(self) -> str:
        return self._under(DEVAI_CONFIG_FILE_PATH)

    def get_new_template_command_default_dir(self) -> str:
        return self._under(DEVAI_NEW_DEFAULT_COMMAND_DIR)

    def get_new_template_command_dirs(self) -> list[str]:
        return [self._under(d) for d in DEVAI_NEW_COMMAND_DIRS]

    def get_new_template_solo_default_dir(self) -> str:
        return self._under(DEVAI_NEW_DEFAULT_SOLO_DIR)

    def get_new_template_solo_dirs(self) -> list[str]:
        return [self._under(d) for d in DEVAI_NEW_SOLO_DIRS]

    def get_command_agent_dirs(self) -> list[str]:
        return [self._under(d) for d in DEVAI_COMMAND_AGENT_DIRS]

    def get_command_agent_default_dir(self) -> str:
        return self._under(DEVAI_AGENT_DEFAULT_DIR)

    def get_command_agent_custom_dir(self) -> str:
        return self._under(DEVAI_AGENT_CUSTOM_DIR)

    def get_doc_dir(self) -> str:
        return self._under(DEVAI_DOC_DIR)


def find_workspace_dir(from_dir: str | os.PathLike[str]) -> str | None:
    """Return the closest directory, from `from_dir` upward, holding a `.devai/`."""
    current = Path(from_dir)
    while True:
        if DevaiDir.from_parent_dir(current).exists():
            return str(current)
        parent = current.parent
        if parent == current:
            return None
        current = parent