from devagent.errors import (
    CauseError,
    CommandAgentNotFoundError,
    DevaiError,
    ModelMissingError,
)


def test_command_agent_not_found_message():
    err = CommandAgentNotFoundError("./x/agent.devai")
    assert str(err) == "Command Agent not found at: ./x/agent.devai"
    assert err.path == "./x/agent.devai"


def test_model_missing_keeps_path():
    err = ModelMissingError("./some/agent.devai")
    assert err.agent_path == "./some/agent.devai"
    assert "./some/agent.devai" in str(err)


def test_cause_error_message_and_chaining():
    original = ValueError("boom")
    err = CauseError("Error while Replay", original)
    assert str(err) == "Error: Error while Replay  Cause: boom"
    assert err.__cause__ is original
    assert err.context == "Error while Replay"


def test_cause_error_is_devai_error_with_text_cause():
    err = CauseError("ctx", "cause")
    assert isinstance(err, DevaiError)
    assert str(err) == "Error: ctx  Cause: cause"


def test_model_missing_is_devai_error():
    err = ModelMissingError("p")
    assert isinstance(err, DevaiError)
    assert err.agent_path == "p"