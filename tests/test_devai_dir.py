from devagent.devai_dir import DevaiDir, find_workspace_dir

SANDBOX_01_DIR = "./tests-data/sandbox-01"


def test_devai_dir_simple():
    devai_dir = DevaiDir.from_parent_dir(SANDBOX_01_DIR)
    assert devai_dir.get_config_toml_path() == "./tests-data/sandbox-01/.devai/config.toml"
    assert (
        devai_dir.get_command_agent_custom_dir()
        == "./tests-data/sandbox-01/.devai/custom/command-agent"
    )


def test_devai_dir_fixed_relative_name():
    assert DevaiDir.from_parent_dir(SANDBOX_01_DIR).devai_dir == "./.devai"


def test_command_agent_dirs_priority():
    devai_dir = DevaiDir.from_parent_dir(SANDBOX_01_DIR)
    dirs = devai_dir.get_command_agent_dirs()
    assert dirs == [
        devai_dir.get_command_agent_custom_dir(),
        devai_dir.get_command_agent_default_dir(),
    ]


def test_template_dirs_end_with_defaults():
    devai_dir = DevaiDir.from_parent_dir(SANDBOX_01_DIR)
    assert devai_dir.get_new_template_command_dirs()[-1] == (
        devai_dir.get_new_template_command_default_dir()
    )
    assert devai_dir.get_new_template_solo_dirs()[-1] == (
        devai_dir.get_new_template_solo_default_dir()
    )
    assert all(d.startswith(devai_dir.devai_dir_full_path) for d in devai_dir.get_new_template_solo_dirs())


def test_doc_dir_under_devai():
    devai_dir = DevaiDir.from_parent_dir(SANDBOX_01_DIR)
    assert devai_dir.get_doc_dir() == devai_dir.devai_dir_full_path + "/doc"


def test_exists_and_find_workspace(tmp_path):
    devai_dir = DevaiDir.from_parent_dir(tmp_path)
    assert devai_dir.exists() is False
    (tmp_path / ".devai").mkdir()
    assert devai_dir.exists() is True

    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_workspace_dir(nested) == str(tmp_path)


def test_find_workspace_none(tmp_path):
    nested = tmp_path / "x"
    nested.mkdir()
    found = find_workspace_dir(nested)
    assert found is None or not found.startswith(str(tmp_path))