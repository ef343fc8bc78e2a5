"""Context literals (`CTX`) exposed to agent scripts."""

from __future__ import annotations

import os
from dataclasses import dataclass

from devagent.agent import Agent
from devagent.dir_context import DirContext, diff_path, join_path
from devagent.errors import DevaiError


@dataclass(frozen=True)
class Literals:
    """Ordered (name, value) pairs describing the workspace and the running agent."""

    store: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_dir_context_and_agent(cls, dir_context: DirContext, agent: Agent) -> Literals:
        agent_path = join_path(dir_context.current_dir, agent.file_path)
        agent_path = f"./{diff_path(agent_path, dir_context.workspace_dir)}"

        agent_dir, sep, agent_file_name = agent_path.rpartition("/")
        if not sep or not agent_dir:
            raise DevaiError(f"Agent {agent_path} does not have a parent dir")

        stem, _ = os.path.splitext(agent_file_name)

        return cls(
            store=(
                ("PWD", dir_context.current_dir),
                ("WORKSPACE_DIR", dir_context.workspace_dir),
                ("DEVAI_DIR", dir_context.devai_dir.devai_dir),
                ("AGENT_NAME", agent.name),
                ("AGENT_FILE_NAME", agent_file_name),
                ("AGENT_FILE_PATH", agent_path),
                ("AGENT_FILE_DIR", agent_dir),
                ("AGENT_FILE_STEM", stem),
            )
        )

    def as_pairs(self) -> list[tuple[str, str]]:
        return list(self.store)

    def to_ctx_value(self) -> dict[str, str]:
        return dict(self.store)