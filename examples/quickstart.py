"""
Quickstart for the toy robot simulator.
- Drives an Interpreter directly, line by line
- Prints each outcome, including rejected lines and their reasons

Run from the repository root:
    python examples/quickstart.py
"""

from toyrobot import Interpreter, OutcomeKind

COMMANDS = [
    "MOVE",
    "PLACE 1,2,EAST",
    "MOVE",
    "MOVE",
    "LEFT",
    "MOVE",
    "REPORT",
    "PLACE 9,9,NORTH",
    "JUMP",
    "REPORT",
]


def main() -> None:
    interpreter = Interpreter()
    for line in COMMANDS:
        outcome = interpreter.interpret(line)
        if outcome.kind is OutcomeKind.REPORT:
            print(f"{line:<18} -> {outcome.text}")
        else:
            print(f"{line:<18} -> {outcome.kind.value} {outcome.reason}".rstrip())


if __name__ == "__main__":
    main()
