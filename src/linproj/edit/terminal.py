"""Process terminal probes used as the default edit I/O."""

from __future__ import annotations

import asyncio
import select
import sys
from typing import TextIO

from linproj.contracts.exceptions import EditValidationError

PIPED_INPUT_WAIT_SECONDS = 0.05


def is_interactive(stream: TextIO | None = None) -> bool:
    stream = stream if stream is not None else sys.stdin
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def has_piped_input(stream: TextIO | None = None, *, timeout: float = PIPED_INPUT_WAIT_SECONDS) -> bool:
    """Return ``True`` when *stream* is a non-terminal with data ready to read.

    Waits at most *timeout* seconds, so automation that leaves stdin open but
    silent is treated as having no piped input.
    """
    stream = stream if stream is not None else sys.stdin
    if stream is None or is_interactive(stream):
        return False
    try:
        readable, _, _ = select.select([stream], [], [], timeout)
    except (OSError, ValueError):
        # Not selectable (closed, or a non-socket handle on Windows).
        return False
    if not readable:
        return False
    # select() also reports EOF as readable; /dev/null and closed pipes carry no input.
    peek = getattr(getattr(stream, "buffer", None), "peek", None)
    if peek is None:
        return True
    try:
        return peek(1) != b""
    except (OSError, ValueError):
        return False


async def read_stdin(stream: TextIO | None = None) -> str:
    """Read all of *stream*, defaulting to the process's stdin.

    Raises:
        EditValidationError: If the input cannot be decoded.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        return await asyncio.to_thread(stream.read)
    except UnicodeDecodeError as exc:
        raise EditValidationError(f"Could not decode input: {exc}") from exc
