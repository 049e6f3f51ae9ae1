"""
Unit tests for the line interpreter: outcome kinds, rejection rules and the
reference command scenarios.
"""

import pytest

from toyrobot.protocol.types import Facing, OutcomeKind
from toyrobot.simulator.interpreter import Interpreter


@pytest.mark.parametrize(
    "lines,expected",
    [
        (["PLACE 0,0,NORTH", "MOVE", "REPORT"], ["0,1,NORTH"]),
        (["PLACE 0,0,NORTH", "LEFT", "REPORT"], ["0,0,WEST"]),
        (["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"], ["3,3,NORTH"]),
        (["PLACE 0,0,NORTH", "PLACE 4,4,SOUTH", "REPORT"], ["4,4,SOUTH"]),
        (["FOO", "PLACE 0,0,NORTH", "BAR 1,2", "REPORT"], ["0,0,NORTH"]),
    ],
    ids=["scenario-a", "scenario-b", "scenario-c", "scenario-d", "scenario-e"],
)
def test_reference_scenarios(run_commands, lines, expected):
    assert run_commands(lines) == expected


def test_multiple_reports_in_order(run_commands):
    lines = ["PLACE 1,1,NORTH", "REPORT", "RIGHT", "MOVE", "REPORT", "MOVE", "MOVE", "MOVE", "MOVE", "REPORT"]
    assert run_commands(lines) == ["1,1,NORTH", "2,1,EAST", "4,1,EAST"]


def test_commands_before_place_are_ignored(run_commands, robot_state):
    assert run_commands(["MOVE", "LEFT", "RIGHT", "REPORT", "REPORT"]) == []
    assert robot_state.placed is False


@pytest.mark.parametrize("line", ["place 0,0,north", "Place 0,0,North", "PLACE 0,0,NORTH"])
def test_keywords_and_directions_case_insensitive(line):
    interp = Interpreter()
    interp.interpret(line)
    assert interp.state.report() == "0,0,NORTH"


def test_report_outcome(interpreter):
    interpreter.interpret("PLACE 2,3,WEST")
    outcome = interpreter.interpret("report")
    assert outcome.kind is OutcomeKind.REPORT
    assert outcome.text == "2,3,WEST"


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_blank_lines_are_not_rejections(interpreter, line):
    outcome = interpreter.interpret(line)
    assert outcome.kind is OutcomeKind.NO_OUTPUT
    assert not outcome.is_rejected


@pytest.mark.parametrize(
    "line",
    [
        "FOO",
        "BAR 1,2",
        "PLACE",
        "PLACE 1,2",
        "PLACE 1,2,NORTH extra",
        "PLACE 1, 2,NORTH",
        "PLACE 1 ,2,NORTH",
        "PLACE -1,2,NORTH",
        "PLACE +1,2,NORTH",
        "PLACE x,2,NORTH",
        "PLACE 1,2,UPWARDS",
        "PLACE1,2,NORTH",
        "MOVE 1",
        "LEFT now",
        "RIGHT RIGHT",
        "REPORT please",
        "MOVEMOVE",
        "rıght",
        "PLACE 1,1,ſouth",
        "ʀeport",
        "MOVÉ",
    ],
)
def test_malformed_lines_rejected_without_state_change(interpreter, line):
    interpreter.interpret("PLACE 2,2,NORTH")
    outcome = interpreter.interpret(line)
    assert outcome.kind is OutcomeKind.REJECTED
    assert outcome.reason
    assert interpreter.state.report() == "2,2,NORTH"


def test_surrounding_whitespace_is_trimmed(interpreter):
    assert interpreter.interpret("   PLACE   3,4,south   ").kind is OutcomeKind.NO_OUTPUT
    assert interpreter.interpret("\tREPORT  ").text == "3,4,SOUTH"


def test_out_of_bounds_place_is_silent_no_op(interpreter):
    interpreter.interpret("PLACE 1,1,EAST")
    outcome = interpreter.interpret("PLACE 5,5,NORTH")
    assert outcome.kind is OutcomeKind.NO_OUTPUT
    assert outcome.reason == "out of bounds"
    assert interpreter.state.report() == "1,1,EAST"


def test_out_of_bounds_place_before_first_place(interpreter):
    assert interpreter.interpret("PLACE 0,9,WEST").kind is OutcomeKind.NO_OUTPUT
    assert interpreter.state.placed is False


def test_blocked_move_and_unplaced_report_produce_no_output(interpreter):
    assert interpreter.interpret("REPORT").kind is OutcomeKind.NO_OUTPUT
    interpreter.interpret("PLACE 0,0,SOUTH")
    outcome = interpreter.interpret("MOVE")
    assert outcome.kind is OutcomeKind.NO_OUTPUT
    assert outcome.reason == "blocked by edge"


def test_reset(interpreter):
    interpreter.interpret("PLACE 4,0,WEST")
    interpreter.reset()
    assert interpreter.state.placed is False
    assert interpreter.state.facing is Facing.NORTH


def test_interpreters_do_not_share_state():
    a, b = Interpreter(), Interpreter()
    a.interpret("PLACE 1,1,NORTH")
    assert b.interpret("REPORT").kind is OutcomeKind.NO_OUTPUT
