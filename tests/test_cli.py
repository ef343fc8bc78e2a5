from pathlib import Path

import pytest

from devagent.cli import CommandName, build_parser, is_interactive, main, parse_args
from devagent.run_options import DryMode, RunCommandOptions


def _make_workspace(root: Path) -> Path:
    devai = root / ".devai"
    (devai / "custom" / "command-agent").mkdir(parents=True)
    (devai / "default" / "command-agent").mkdir(parents=True)
    (devai / "config.toml").write_text('[genai]\nmodel = "gpt-4o-mini"\n')
    template_dir = devai / "default" / "new-template" / "command-agent"
    template_dir.mkdir(parents=True)
    (template_dir / "default.devai").write_text("# Instruction\nHello\n")
    solo_template_dir = devai / "default" / "new-template" / "solo-agent"
    solo_template_dir.mkdir(parents=True)
    (solo_template_dir / "default.devai").write_text("# Instruction\nSolo\n")
    return devai


def test_parse_run_with_inputs():
    args = parse_args(["run", "proof-read", "-i", "one", "--input", "two", "-v", "--dry", "req"])
    assert args.command is CommandName.RUN
    assert args.cmd_agent_name == "proof-read"
    assert args.on_inputs == ["one", "two"]
    assert args.on_files is None
    assert args.verbose is True
    assert args.watch is False
    assert args.dry_mode == "req"


def test_parse_run_files_into_options():
    args = parse_args(["run", "pc", "-f", "main.rs", "-f", "./src/lib.rs", "-w"])
    options = RunCommandOptions.from_run_args(args)
    assert options.on_file_globs == ("**/main.rs", "./src/lib.rs")
    assert options.on_inputs is None
    assert options.base_run_config.watch is True
    assert options.base_run_config.dry_mode is DryMode.NONE


def test_parse_invalid_dry_mode_exits():
    with pytest.raises(SystemExit):
        parse_args(["run", "pc", "--dry", "other"])


def test_parse_missing_command_exits():
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_new_solo_alias():
    args = parse_args(["ns", "./some/file.md", "-o"])
    assert args.command is CommandName.NEW_SOLO
    assert args.path == "./some/file.md"
    assert args.open is True


def test_parse_init_optional_path():
    assert parse_args(["init"]).path is None
    assert parse_args(["init", "sub"]).path == "sub"


def test_parse_solo_and_list():
    solo = parse_args(["solo", "./src/main.rs", "--dry", "res"])
    assert solo.command is CommandName.SOLO
    assert solo.dry_mode == "res"
    assert parse_args(["list"]).command is CommandName.LIST


def test_build_parser_new():
    args = build_parser().parse_args(["new", "my-cool-agent"])
    assert args.command is CommandName.NEW
    assert args.agent_path == "my-cool-agent"
    assert args.open is False


@pytest.mark.parametrize(
    "command, expected",
    [
        (CommandName.RUN, True),
        (CommandName.SOLO, True),
        (CommandName.INIT, False),
        (CommandName.NEW, False),
        (CommandName.NEW_SOLO, False),
        (CommandName.LIST, False),
    ],
)
def test_is_interactive(command, expected):
    assert is_interactive(command) is expected


def test_main_list(tmp_path, monkeypatch, capsys):
    devai = _make_workspace(tmp_path)
    (devai / "custom" / "command-agent" / "hello-world.devai").write_text("# Instruction\nhi\n")
    monkeypatch.chdir(tmp_path)

    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "List of available command agents:" in out
    assert "- hello-world (hw)" in out
    assert "happy coding" in out


def test_main_new_creates_agent(tmp_path, monkeypatch):
    devai = _make_workspace(tmp_path)
    monkeypatch.chdir(tmp_path)

    assert main(["new", "my-agent"]) == 0
    created = devai / "custom" / "command-agent" / "my-agent.devai"
    assert created.read_text() == "# Instruction\nHello\n"


def test_main_new_solo_creates_file(tmp_path, monkeypatch, capsys):
    _make_workspace(tmp_path)
    monkeypatch.chdir(tmp_path)

    assert main(["new-solo", "docs/readme.md"]) == 0
    assert (tmp_path / "docs" / "readme.md.devai").read_text() == "# Instruction\nSolo\n"
    assert "-> New solo file created: docs/readme.md.devai" in capsys.readouterr().out


def test_main_without_workspace_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    if (Path(tmp_path).parent / ".devai").exists():
        pytest.fail("unexpected .devai above tmp_path")
    assert main(["list"]) == 1
    assert "Error:" in capsys.readouterr().err