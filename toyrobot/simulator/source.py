"""
Command line sources: files or stdin, read lazily one line at a time.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from toyrobot.config import COMMENT_PREFIX
from toyrobot.utils.errors import CommandSourceError

logger = logging.getLogger(__name__)


def iter_command_lines(stream: TextIO) -> Iterator[str]:
    """
    Yield stripped command lines from ``stream``, skipping blanks and comments.

    Read errors raised mid-stream surface as CommandSourceError.
    """
    lineno = 0
    try:
        for lineno, raw in enumerate(stream, start=1):
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            yield line
    except (OSError, UnicodeDecodeError) as e:
        raise CommandSourceError(f"error reading input after line {lineno}: {e}") from e


@contextlib.contextmanager
def open_command_source(path: str | Path | None = None) -> Iterator[TextIO]:
    """
    Open a command source. ``None`` or ``"-"`` means stdin (left open on exit).

    Raises:
        CommandSourceError: if the file is missing or cannot be opened
    """
    if path is None or str(path) == "-":
        logger.debug("Reading commands from stdin")
        yield sys.stdin
        return

    p = Path(path)
    if not p.is_file():
        raise CommandSourceError(f"File '{path}' not found")
    try:
        stream = p.open("r", encoding="utf-8")
    except OSError as e:
        raise CommandSourceError(f"cannot open '{path}': {e}") from e

    logger.debug("Reading commands from %s", p)
    with stream:
        yield stream
