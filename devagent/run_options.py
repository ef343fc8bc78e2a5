"""Options controlling command-agent and solo-agent runs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from devagent.agent import Agent
from devagent.errors import DevaiError


class DryMode(Enum):
    """Where a dry run stops: before the request, after the response, or not at all."""

    REQ = "req"
    RES = "res"
    NONE = "none"


def parse_dry_mode(value: str | None) -> DryMode:
    if value == "req":
        return DryMode.REQ
    if value == "res":
        return DryMode.RES
    return DryMode.NONE


@dataclass(frozen=True)
class RunBaseOptions:
    watch: bool = False
    verbose: bool = False
    dry_mode: DryMode = DryMode.NONE
    open: bool = False


def _base_options(args: Any) -> RunBaseOptions:
    return RunBaseOptions(
        watch=bool(getattr(args, "watch", False)),
        verbose=bool(getattr(args, "verbose", False)),
        dry_mode=parse_dry_mode(getattr(args, "dry_mode", None)),
        open=bool(getattr(args, "open", False)),
    )


def _refine_glob(value: str) -> str:
    if "*" in value or value.startswith("./") or value.startswith("/"):
        return value
    return f"**/{value}"


@dataclass(frozen=True)
class RunCommandOptions:
    on_file_globs: tuple[str, ...] | None = None
    on_inputs: tuple[str, ...] | None = None
    base_run_config: RunBaseOptions = field(default_factory=RunBaseOptions)

    @classmethod
    def from_run_args(cls, args: Any) -> RunCommandOptions:
        """Build options from parsed `run` arguments; inputs and files are exclusive."""
        on_inputs = getattr(args, "on_inputs", None)
        on_files = getattr(args, "on_files", None)
        if on_inputs is not None and on_files is not None:
            raise DevaiError("Cannot use both --on-inputs and --on-files")

        return cls(
            on_file_globs=None if on_files is None else tuple(_refine_glob(f) for f in on_files),
            on_inputs=None if on_inputs is None else tuple(on_inputs),
            base_run_config=_base_options(args),
        )


@dataclass(frozen=True)
class RunSoloOptions:
    target_path: str
    base_run_config: RunBaseOptions = field(default_factory=RunBaseOptions)

    @classmethod
    def from_solo_args(cls, args: Any, target_path: str) -> RunSoloOptions:
        return cls(target_path=target_path, base_run_config=_base_options(args))


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def get_genai_info(agent: Agent) -> str:
    """Return a ` (temperature: ...)` suffix describing the agent's genai settings."""
    infos: list[str] = []
    if agent.config.temperature is not None:
        infos.append(f"temperature: {_format_number(agent.config.temperature)}")
    return f" ({', '.join(infos)})" if infos else ""