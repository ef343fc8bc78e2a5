"""Command-line interface: argument parsing and command dispatch."""

from __future__ import annotations

import argparse
import queue
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from devagent.commands import exec_list, exec_new, exec_new_solo
from devagent.devai_dir import DevaiDir, find_workspace_dir
from devagent.dir_context import DirContext
from devagent.errors import DevaiError
from devagent.hub import Hub, HubEvent, HubEventKind, get_hub

_FAREWELL = "\n     ---- Until next one, happy coding! ----"


class CommandName(Enum):
    """The sub-commands the CLI accepts."""

    INIT = "init"
    RUN = "run"
    SOLO = "solo"
    NEW = "new"
    NEW_SOLO = "new-solo"
    LIST = "list"


def _package_version() -> str:
    try:
        return version("devagent")
    except PackageNotFoundError:
        return "0.0.0"


def _add_dry(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry",
        dest="dry_mode",
        choices=["req", "res"],
        default=None,
        help="Dry mode, takes either 'req' or 'res'",
    )


def _add_flag(parser: argparse.ArgumentParser, short: str, long: str, dest: str, text: str) -> None:
    parser.add_argument(short, long, dest=dest, action="store_true", help=text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(prog="devai", description="Run and manage command agents.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    subparsers = parser.add_subparsers(dest="command_name", required=True)

    init = subparsers.add_parser(
        "init",
        help="Initialize the `.devai/` folder with the base setting files.",
    )
    init.add_argument("path", nargs="?", default=None)
    init.set_defaults(command=CommandName.INIT)

    run = subparsers.add_parser(
        "run",
        help="Executes the Command Agent <name> based on its name or short name.",
    )
    run.add_argument("cmd_agent_name")
    run.add_argument("-i", "--input", dest="on_inputs", action="append", default=None)
    run.add_argument("-f", "--on-files", dest="on_files", action="append", default=None)
    _add_flag(run, "-w", "--watch", "watch", "Watch the agent file")
    _add_flag(run, "-v", "--verbose", "verbose", "Verbose mode")
    _add_flag(run, "-o", "--open", "open", "Open the command agent file")
    _add_dry(run)
    run.set_defaults(command=CommandName.RUN)

    solo = subparsers.add_parser(
        "solo",
        help="Run a solo agent for a <path> relative to where the devai is run.",
    )
    solo.add_argument("path")
    _add_flag(solo, "-w", "--watch", "watch", "Watch the agent file")
    _add_flag(solo, "-v", "--verbose", "verbose", "Verbose mode")
    _add_flag(solo, "-o", "--open", "open", "Open the solo agent and target files")
    _add_dry(solo)
    solo.set_defaults(command=CommandName.SOLO)

    new = subparsers.add_parser(
        "new",
        help="Create a New Command Agent under `.devai/custom/command-agent/`",
    )
    new.add_argument("agent_path")
    _add_flag(new, "-o", "--open", "open", "Open the .devai file")
    new.set_defaults(command=CommandName.NEW)

    new_solo = subparsers.add_parser(
        "new-solo",
        aliases=["ns"],
        help="Create a new solo command at the <path>.",
    )
    new_solo.add_argument("path")
    _add_flag(new_solo, "-o", "--open", "open", "Open the .devai file")
    new_solo.set_defaults(command=CommandName.NEW_SOLO)

    list_cmd = subparsers.add_parser("list", help="List the available command agents")
    list_cmd.set_defaults(command=CommandName.LIST)

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; `command` holds the CommandName."""
    return build_parser().parse_args(argv)


def is_interactive(command: CommandName) -> bool:
    """Whether the command runs in interactive mode (run and solo)."""
    return command in (CommandName.RUN, CommandName.SOLO)


def _dir_context() -> DirContext:
    workspace = find_workspace_dir(Path.cwd())
    if workspace is None:
        raise DevaiError("No `.devai/` directory found. Run `devai init` first.")
    devai_dir = DevaiDir.from_parent_dir(str(Path(workspace).resolve()))
    return DirContext.from_devai_dir(devai_dir)


def _unavailable(args: argparse.Namespace) -> None:
    raise DevaiError(f"The '{args.command.value}' command is not available")


_HANDLERS: dict[CommandName, Callable[[argparse.Namespace], object]] = {
    CommandName.LIST: lambda args: exec_list(_dir_context()),
    CommandName.NEW: lambda args: exec_new(args.agent_path, args.open, _dir_context()),
    CommandName.NEW_SOLO: lambda args: exec_new_solo(args.path, args.open, _dir_context()),
    CommandName.INIT: _unavailable,
    CommandName.RUN: _unavailable,
    CommandName.SOLO: _unavailable,
}


def _print_event(event: HubEvent) -> None:
    if event.kind is HubEventKind.MESSAGE:
        print(event.message)
    elif event.kind is HubEventKind.ERROR:
        print(f"Error: {event.error}", file=sys.stderr)


def _drain(subscriber: queue.Queue[HubEvent]) -> None:
    while True:
        try:
            event = subscriber.get_nowait()
        except queue.Empty:
            return
        _print_event(event)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the command and print hub output; return the exit code."""
    args = parse_args(argv)
    hub: Hub = get_hub()
    subscriber = hub.subscribe()
    status = 0
    try:
        _HANDLERS[args.command](args)
    except DevaiError as err:
        hub.publish(err)
        status = 1
    finally:
        _drain(subscriber)
        hub.unsubscribe(subscriber)
    print(_FAREWELL)
    return status


if __name__ == "__main__":
    sys.exit(main())