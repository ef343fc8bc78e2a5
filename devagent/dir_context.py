"""Directory context: current, workspace and `.devai` directories and path resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from devagent.errors import DevaiError

if TYPE_CHECKING:
    from devagent.devai_dir import DevaiDir


def _is_abs(path: str) -> bool:
    return path.startswith("/") or os.path.isabs(path)


def join_path(base: str | os.PathLike[str], path: str | os.PathLike[str]) -> str:
    """Join `path` onto `base` textually, keeping prefixes such as `./` intact."""
    base_str, path_str = os.fspath(base), os.fspath(path)
    if _is_abs(path_str) or not base_str:
        return path_str
    if base_str.endswith("/"):
        return base_str + path_str
    return f"{base_str}/{path_str}"


def _components(path: str) -> list[str]:
    return [part for part in path.replace(os.sep, "/").split("/") if part not in ("", ".")]


def diff_path(path: str | os.PathLike[str], base: str | os.PathLike[str]) -> str:
    """Return `path` relative to `base`; raise DevaiError when no such path exists."""
    path_str, base_str = os.fspath(path), os.fspath(base)
    if _is_abs(path_str) != _is_abs(base_str):
        if _is_abs(path_str):
            return path_str
        raise DevaiError(f"Cannot diff '{path_str}' from '{base_str}'")

    remaining_path = _components(path_str)
    remaining_base = _components(base_str)
    result: list[str] = []
    while True:
        a = remaining_path.pop(0) if remaining_path else None
        b = remaining_base.pop(0) if remaining_base else None
        if a is None and b is None:
            break
        if b is None:
            result.append(a)  # type: ignore[arg-type]
            result.extend(remaining_path)
            break
        if a is None:
            result.append("..")
            continue
        if not result and a == b:
            continue
        if b == "..":
            raise DevaiError(f"Cannot diff '{path_str}' from '{base_str}'")
        result.append("..")
        result.extend(".." for _ in remaining_base)
        result.append(a)
        result.extend(remaining_path)
        break
    return "/".join(result)


class PathResolver(Enum):
    CURRENT_DIR = "current_dir"
    DEVAI_PARENT_DIR = "devai_parent_dir"


@dataclass(frozen=True)
class DirContext:
    """Absolute current dir and workspace dir, plus the `.devai` directory."""

    current_dir: str
    devai_dir: DevaiDir
    workspace_dir: str

    @classmethod
    def from_devai_dir(
        cls, devai_dir: DevaiDir, current_dir: str | os.PathLike[str] | None = None
    ) -> DirContext:
        """Build a context; both directories must exist and are made absolute."""
        current = os.getcwd() if current_dir is None else current_dir
        workspace_dir = Path(devai_dir.parent_dir).resolve(strict=True)
        current_abs = Path(current).resolve(strict=True)
        return cls(
            current_dir=str(current_abs),
            devai_dir=devai_dir,
            workspace_dir=str(workspace_dir),
        )

    def resolve_path(self, path: str | os.PathLike[str], mode: PathResolver) -> str:
        path_str = os.fspath(path)
        if _is_abs(path_str):
            return path_str
        if mode is PathResolver.CURRENT_DIR:
            return join_path(self.current_dir, path_str)
        return join_path(self.workspace_dir, path_str)