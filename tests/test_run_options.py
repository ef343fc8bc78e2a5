from argparse import Namespace

import pytest

from devagent.agent import Agent, AgentConfig
from devagent.errors import DevaiError
from devagent.run_options import (
    DryMode,
    RunBaseOptions,
    RunCommandOptions,
    RunSoloOptions,
    get_genai_info,
    parse_dry_mode,
)


def _run_args(**overrides):
    values = dict(
        cmd_agent_name="pc",
        on_inputs=None,
        on_files=None,
        watch=False,
        verbose=False,
        open=False,
        dry_mode=None,
    )
    values.update(overrides)
    return Namespace(**values)


def _agent(temperature=None):
    return Agent(
        config=AgentConfig(model="gpt-4o-mini", temperature=temperature),
        name="a",
        file_name="a.devai",
        file_path="./a.devai",
    )


@pytest.mark.parametrize(
    "value, expected",
    [("req", DryMode.REQ), ("res", DryMode.RES), (None, DryMode.NONE), ("other", DryMode.NONE)],
)
def test_parse_dry_mode(value, expected):
    assert parse_dry_mode(value) is expected


def test_default_base_options():
    base = RunBaseOptions()
    assert (base.watch, base.verbose, base.open, base.dry_mode) == (False, False, False, DryMode.NONE)


def test_inputs_and_files_are_exclusive():
    with pytest.raises(DevaiError):
        RunCommandOptions.from_run_args(_run_args(on_inputs=["a"], on_files=["b"]))


def test_file_globs_are_refined():
    options = RunCommandOptions.from_run_args(
        _run_args(on_files=["main.rs", "src/*.rs", "./local.txt", "/abs/file.txt"])
    )
    assert options.on_file_globs == ("**/main.rs", "src/*.rs", "./local.txt", "/abs/file.txt")
    assert options.on_inputs is None


def test_inputs_kept_and_base_options_copied():
    options = RunCommandOptions.from_run_args(
        _run_args(on_inputs=["one", "two"], watch=True, verbose=True, open=True, dry_mode="req")
    )
    assert options.on_inputs == ("one", "two")
    assert options.on_file_globs is None
    assert options.base_run_config == RunBaseOptions(
        watch=True, verbose=True, dry_mode=DryMode.REQ, open=True
    )


def test_solo_options_from_args():
    args = Namespace(path="./some/file.md", watch=True, verbose=False, open=False, dry_mode="res")
    options = RunSoloOptions.from_solo_args(args, "./some/file.md")
    assert options.target_path == "./some/file.md"
    assert options.base_run_config.watch is True
    assert options.base_run_config.dry_mode is DryMode.RES


def test_genai_info_without_temperature():
    assert get_genai_info(_agent()) == ""


def test_genai_info_with_temperature():
    assert get_genai_info(_agent(0.5)) == " (temperature: 0.5)"
    assert get_genai_info(_agent(1.0)) == " (temperature: 1)"