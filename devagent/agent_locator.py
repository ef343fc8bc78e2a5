"""Locating and loading command agents and solo agents."""

from __future__ import annotations

import os
from pathlib import Path

from devagent.agent import Agent, AgentConfig
from devagent.agent_doc import AgentDoc, parse_toml
from devagent.dir_context import DirContext, PathResolver, join_path
from devagent.errors import CommandAgentNotFoundError, DevaiError

_MAX_SIMILAR_DISTANCE = 5
_AGENT_EXT = "devai"


def _stem(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def _ext(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[1].lstrip(".")


def _sibling(path: str, name: str) -> str:
    parent, sep, _ = path.rpartition("/")
    return f"{parent}/{name}" if sep else name


def _list_agent_files(directory: str) -> list[str]:
    """All `.devai` files below `directory`, recursively, in a stable order."""
    root = Path(directory)
    if not root.is_dir():
        return []
    return [
        join_path(directory, found.relative_to(root).as_posix())
        for found in sorted(root.rglob(f"*.{_AGENT_EXT}"))
        if found.is_file()
    ]


def load_base_agent_config(dir_context: DirContext) -> AgentConfig:
    """Load the agent configuration from the `.devai/config.toml` file."""
    config_path = dir_context.devai_dir.get_config_toml_path()
    try:
        with open(config_path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise DevaiError(f"Cannot read config file '{config_path}': {exc}") from exc
    return AgentConfig.from_value(parse_toml(content))


def find_agent(agent_name: str, dir_context: DirContext, mode: PathResolver) -> Agent:
    """Find a command agent by `.devai` path, by name or by initials."""
    base_config = load_base_agent_config(dir_context)

    if _ext(agent_name) == _AGENT_EXT:
        agent_file = dir_context.resolve_path(agent_name, mode)
        if not os.path.isfile(agent_file):
            raise CommandAgentNotFoundError(agent_name)
        return AgentDoc.from_file(agent_file).into_agent(agent_name, base_config)

    dirs = dir_context.devai_dir.get_command_agent_dirs()

    doc = _find_agent_doc_in_dirs(agent_name, dirs)
    if doc is not None:
        return doc.into_agent(agent_name, base_config)

    similar = find_similar_agent_paths(agent_name, dirs)
    if similar:
        bullets = "\n".join(agent_file_as_bullet(path) for path in similar)
        message = f"Agent '{agent_name}' not found.\nDid you mean one of these?\n{bullets}"
    else:
        bullets = "\n".join(agent_file_as_bullet(path) for path in list_all_agent_files(dir_context))
        message = (
            f"Agent '{agent_name}' not found.\n"
            f"Here is the list of available command agents:\n{bullets}"
        )
    raise DevaiError(message)


def load_solo_agent(solo_agent_path: str | os.PathLike[str], dir_context: DirContext) -> Agent:
    """Load a solo agent from a path relative to the current directory."""
    base_config = load_base_agent_config(dir_context)
    solo_name = os.fspath(solo_agent_path)
    solo_file = join_path(dir_context.current_dir, solo_name)
    if not os.path.isfile(solo_file):
        raise DevaiError(f"Solo file not found: {solo_file}")
    return AgentDoc.from_file(solo_file).into_agent(solo_name, base_config)


def get_solo_and_target_path(path: str | os.PathLike[str]) -> tuple[str, str]:
    """Return `(solo_path, target_path)` for either path; the file system is not consulted."""
    path_str = os.fspath(path)
    if _ext(path_str) == _AGENT_EXT:
        stem = _stem(path_str)
        target_name = stem if Path(stem).suffix else f"{stem}.md"
        return path_str, _sibling(path_str, target_name)
    solo_path = _sibling(path_str, f"{os.path.basename(path_str)}.{_AGENT_EXT}")
    return solo_path, path_str


def list_all_agent_files(dir_context: DirContext) -> list[str]:
    """List agent files, custom before default; a stem already seen is left out."""
    files: list[str] = []
    seen_stems: set[str] = set()
    for directory in dir_context.devai_dir.get_command_agent_dirs():
        for path in _list_agent_files(directory):
            stem = _stem(path)
            if stem in seen_stems:
                continue
            seen_stems.add(stem)
            files.append(path)
    return files


def agent_file_as_bullet(path: str) -> str:
    stem = _stem(path)
    msg = f"- {stem} ({get_initials(stem)})"
    return f"{msg:<37} - for '{path}'"


def get_initials(value: str) -> str:
    """First character of each `-` separated part, ignoring leading underscores."""
    return "".join(part.lstrip("_")[:1] for part in value.split("-"))


def levenshtein(left: str, right: str) -> int:
    """Edit distance between two strings, counted in characters."""
    if not left:
        return len(right)
    previous = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            cost = 0 if left_char == right_char else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def find_similar_agent_paths(name: str, dirs: list[str]) -> list[str]:
    """The up to three agent files whose stems are closest to `name`."""
    scored = [
        (path, distance)
        for directory in dirs
        for path in _list_agent_files(directory)
        if (distance := levenshtein(name, _stem(path))) <= _MAX_SIMILAR_DISTANCE
    ]
    scored.sort(key=lambda item: item[1])
    return [path for path, _ in scored[:3]]


def _match_agent(name: str, path: str) -> bool:
    stem = _stem(path)
    return name == stem or name == get_initials(stem)


def _find_agent_doc_in_dirs(name: str, dirs: list[str]) -> AgentDoc | None:
    for directory in dirs:
        for path in _list_agent_files(directory):
            if _match_agent(name, path):
                return AgentDoc.from_file(os.path.realpath(path))
    return None