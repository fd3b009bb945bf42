"""Small usage examples of print_text."""

from __future__ import annotations

import os

from textprint.printing import print_text


def hello_to_stdout() -> None:
    """Write "hello" to standard output."""
    print_text("hello")


def hello_to_file(path: str | os.PathLike[str] = "log.txt") -> None:
    """Write "hello" to the file at ``path``, replacing its contents."""
    with open(path, "w", encoding="utf-8") as file:
        print_text("hello", file)