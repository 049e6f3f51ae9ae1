"""
Simulation runner and command-line entry point.

Streams lines from a source through the interpreter and prints every report
to stdout. Logs go to stderr so they never mix with reports.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from toyrobot._version import __version__
from toyrobot.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL_DEFAULT, LOG_LEVELS, TRACE, TRACE_ENABLED, resolve_log_level
from toyrobot.protocol.types import OutcomeKind
from toyrobot.simulator.interpreter import Interpreter
from toyrobot.simulator.source import iter_command_lines, open_command_source
from toyrobot.utils.errors import CommandSourceError

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """Drives an Interpreter over a line stream and keeps run counters."""
    interpreter: Interpreter = field(default_factory=Interpreter)
    lines: int = 0
    accepted: int = 0
    rejected: int = 0
    reports: int = 0

    def feed(self, lines: Iterable[str]) -> Iterator[str]:
        """Interpret ``lines`` in order, yielding report text as it is produced."""
        for line in lines:
            # Blank lines are no-ops and stay out of the counters
            if not line.strip():
                continue
            self.lines += 1
            outcome = self.interpreter.interpret(line)
            if outcome.kind is OutcomeKind.REJECTED:
                self.rejected += 1
                continue
            self.accepted += 1
            if outcome.kind is OutcomeKind.REPORT and outcome.text is not None:
                self.reports += 1
                yield outcome.text

    def summary(self) -> str:
        return f"lines={self.lines} accepted={self.accepted} rejected={self.rejected} reports={self.reports}"


def run_lines(lines: Iterable[str], interpreter: Interpreter | None = None) -> Iterator[str]:
    """Lazily yield the report output for a sequence of command lines."""
    sim = Simulation(interpreter if interpreter is not None else Interpreter())
    yield from sim.feed(lines)


def run_stream(stream: TextIO, out: TextIO, interpreter: Interpreter | None = None) -> Simulation:
    """
    Run every command line in ``stream``, writing reports to ``out``.

    Raises:
        CommandSourceError: if the stream breaks while being read
    """
    sim = Simulation(interpreter if interpreter is not None else Interpreter())
    for report in sim.feed(iter_command_lines(stream)):
        out.write(report + "\n")
        out.flush()
    logger.info("Run finished: %s", sim.summary())
    return sim


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toyrobot",
        description="Toy robot simulator on a 5x5 table (PLACE X,Y,F | MOVE | LEFT | RIGHT | REPORT)",
    )
    parser.add_argument("input", nargs="?", help="Command file (reads stdin if omitted)")
    parser.add_argument("-f", "--file", dest="file", help="Command file (alternative to positional input)")
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only log errors')
    parser.add_argument('--log-level', choices=list(LOG_LEVELS),
                        help='Set specific log level')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        return resolve_log_level(args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if TRACE_ENABLED:
        return TRACE
    return resolve_log_level(LOG_LEVEL_DEFAULT)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the simulator CLI. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.file and args.input:
        parser.error("give the command file either positionally or with -f, not both")

    logging.basicConfig(
        level=_log_level(args),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )

    path = args.file or args.input
    try:
        with open_command_source(path) as stream:
            run_stream(stream, sys.stdout)
    except CommandSourceError as e:
        logger.debug("Command source failed", exc_info=True)
        print(f"Error: {e.original_message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0
