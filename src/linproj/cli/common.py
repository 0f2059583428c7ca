"""Shared CLI output helpers."""

from __future__ import annotations

import sys
from typing import TextIO


def print_error(message: str, *, stream: TextIO | None = None) -> None:
    print(f"Error: {message}", file=stream or sys.stderr)


def stderr_is_terminal() -> bool:
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False
