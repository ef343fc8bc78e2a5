"""Commands listing agents, creating new agents and opening files in the editor."""

from __future__ import annotations

import os
import shutil
import subprocess

from devagent.agent_locator import agent_file_as_bullet, get_solo_and_target_path, list_all_agent_files
from devagent.dir_context import DirContext, PathResolver, join_path
from devagent.errors import DevaiError
from devagent.hub import get_hub

_TEMPLATE_NAME = "default.devai"


def open_vscode(path: str | os.PathLike[str]) -> None:
    """Open `path` with the `code` command; a failing command is reported on the hub."""
    try:
        result = subprocess.run(["code", os.fspath(path)], capture_output=True)
    except OSError as exc:
        raise DevaiError(f"Failed to execute VSCode 'code' command: {exc}") from exc
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""
        get_hub().publish(DevaiError(f"Error opening VSCode: {stderr}"))


def exec_list(dir_context: DirContext) -> None:
    """Publish the list of available command agents."""
    bullets = "\n".join(agent_file_as_bullet(path) for path in list_all_agent_files(dir_context))
    get_hub().publish(f"List of available command agents:\n{bullets}")


def _first_file_from_dirs(dirs: list[str], name: str) -> str | None:
    for directory in dirs:
        candidate = join_path(directory, name)
        if os.path.isfile(candidate):
            return candidate
    return None


def _with_devai_ext(path: str) -> str:
    return path if path.endswith(".devai") else f"{path}.devai"


def exec_new(agent_path: str, open_file: bool, dir_context: DirContext) -> str:
    """Create a custom command agent from the template; return its path."""
    devai_dir = dir_context.devai_dir
    template = _first_file_from_dirs(devai_dir.get_new_template_command_dirs(), _TEMPLATE_NAME)
    if template is None:
        raise DevaiError("command agent template 'default.devai' not found")

    dest_file = join_path(devai_dir.get_command_agent_custom_dir(), _with_devai_ext(agent_path))

    if not os.path.exists(dest_file):
        shutil.copyfile(template, dest_file)
    else:
        get_hub().publish(f"-! Command agent file '{dest_file}' already exists.")

    if open_file:
        open_vscode(dest_file)

    return dest_file


def exec_new_solo(path: str, open_file: bool, dir_context: DirContext) -> str:
    """Create a solo agent from the template at `path`; return the solo file path."""
    hub = get_hub()
    template = _first_file_from_dirs(
        dir_context.devai_dir.get_new_template_solo_dirs(), _TEMPLATE_NAME
    )
    if template is None:
        raise DevaiError("solo agent template 'default.devai' not found")

    solo_file = _with_devai_ext(path)

    if not os.path.exists(solo_file):
        parent = os.path.dirname(solo_file)
        if parent:
            os.makedirs(parent, exist_ok=True)
        shutil.copyfile(template, solo_file)
        hub.publish(f"-> New solo file created: {solo_file}")
    else:
        hub.publish(f"-! Solo agent file '{solo_file}' already exists.")

    if open_file:
        _, target_path = get_solo_and_target_path(solo_file)
        target_path = dir_context.resolve_path(target_path, PathResolver.CURRENT_DIR)
        if os.path.exists(target_path):
            open_vscode(target_path)
        open_vscode(solo_file)

    return solo_file