"""Relative-cursor erase and inline error helpers.

Nothing here knows absolute positions. Each helper documents where it
expects the cursor to be and where it leaves it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .terminal import ANSI, Terminal


def erase_backward(terminal: Terminal, count: int) -> None:
    """Blank the ``count`` columns left of the cursor.

    The cursor ends ``count`` columns to the left of where it started.
    """
    if count <= 0:
        return
    step = ANSI.cursor_left(1) + " " + ANSI.cursor_left(1)
    terminal.write(step * count)


def erase_forward(terminal: Terminal, count: int) -> None:
    """Blank ``count`` columns starting at the cursor; the cursor stays put."""
    if count <= 0:
        return
    terminal.write(" " * count + ANSI.cursor_left(count))


@dataclass
class ErrorAnnotation:
    """Length of the error message currently drawn at the cursor (0 if none)."""

    length: int = 0

    @property
    def shown(self) -> bool:
        return self.length > 0

    def clear(self, terminal: Terminal) -> None:
        if self.length > 0:
            erase_forward(terminal, self.length)
        self.length = 0


def show_error(terminal: Terminal, message: str, annotation: ErrorAnnotation) -> None:
    """Draw ``message`` highlighted at the cursor and step back over it.

    The cursor is left where the message starts, so typing resumes at the
    same spot, and the message length is recorded for a later erase.
    """
    terminal.write(ANSI.ERROR + message + ANSI.RESET + ANSI.cursor_left(len(message)))
    annotation.length = len(message)
