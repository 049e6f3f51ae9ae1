import pytest

from toyrobot.commands.base import (
    CommandBase,
    ExecutionStatus,
    ExecutionStatusCode,
    expect_len,
    parse_unsigned_int,
)


class DummyCommand(CommandBase):
    def do_match(self, parts):
        if parts and parts[0] == "BOOM":
            raise ValueError("bad parameters")
        return True, None

    def execute_step(self, state) -> ExecutionStatus:
        return ExecutionStatus.completed("ok")


def test_lifecycle_flags():
    base = DummyCommand()
    assert base.is_valid is True
    assert base.is_finished is False
    assert base.error_message == ""

    base.finish()
    assert base.is_finished is True
    # fail() should mark invalid + finished and capture message
    base = DummyCommand()
    base.fail("boom")
    assert base.is_valid is False
    assert base.is_finished is True
    assert base.error_message == "boom"


def test_execute_is_one_shot(robot_state):
    cmd = DummyCommand()
    assert cmd.execute(robot_state).ok
    second = cmd.execute(robot_state)
    assert second.code is ExecutionStatusCode.FAILED
    assert second.message == "Already finished"


def test_match_converts_value_error():
    ok, err = DummyCommand().match(["BOOM"])
    assert ok is False
    assert err == "bad parameters"


def test_name_falls_back_to_class_name():
    assert DummyCommand().name == "DummyCommand"


@pytest.mark.parametrize("token,value", [("0", 0), ("4", 4), ("007", 7), ("12345", 12345)])
def test_parse_unsigned_int(token, value):
    assert parse_unsigned_int(token) == value


@pytest.mark.parametrize("token", ["", "-1", "+1", " 1", "1 ", "1.0", "x1", "1e3", "١"])
def test_parse_unsigned_int_rejects(token):
    with pytest.raises(ValueError):
        parse_unsigned_int(token)


def test_expect_len():
    expect_len(["MOVE"], 1, "MOVE")
    with pytest.raises(ValueError, match="requires 0 parameters, got 1"):
        expect_len(["MOVE", "NOW"], 1, "MOVE")


def test_execution_status_helpers():
    done = ExecutionStatus.completed(details={"report": "0,0,NORTH"})
    assert done.ok and done.details == {"report": "0,0,NORTH"}
    failed = ExecutionStatus.failed("not placed")
    assert not failed.ok and failed.message == "not placed"
