"""Test doubles: a tiny terminal emulator and a scripted key source."""

from __future__ import annotations

import re

from painless_input.elements.base import InputEvent, KeyEventKind

_TOKEN_RE = re.compile(r"\x1b\[(\??)([0-9;]*)([A-Za-z])|(.)", re.DOTALL)


class Screen:
    """File-like sink that interprets the escape sequences the prompts emit.

    Supports cursor up/down/left, carriage return, newline, cursor show/hide
    and ignores SGR styling. Every other character is drawn at the cursor
    and advances it by one column.
    """

    def __init__(self) -> None:
        self.raw = ""
        self.rows: dict[int, dict[int, str]] = {}
        self.row = 0
        self.col = 0
        self.cursor_visible = True
        self.flushes = 0

    def write(self, data: str) -> int:
        self.raw += data
        for match in _TOKEN_RE.finditer(data):
            private, params, final, ch = match.groups()
            if ch is not None:
                self._put(ch)
                continue
            n = int(params) if params.isdigit() else 1
            if private:
                if params == "25":
                    self.cursor_visible = final == "h"
            elif final == "D":
                self.col = max(self.col - n, 0)
            elif final == "A":
                self.row = max(self.row - n, 0)
            elif final == "B":
                self.row += n
            # "m" (styling) and anything else leave the grid alone

        return len(data)

    def flush(self) -> None:
        self.flushes += 1

    def _put(self, ch: str) -> None:
        if ch == "\r":
            self.col = 0
        elif ch == "\n":
            self.row += 1
        else:
            self.rows.setdefault(self.row, {})[self.col] = ch
            self.col += 1

    def line(self, row: int = 0) -> str:
        cells = self.rows.get(row, {})
        if not cells:
            return ""
        text = "".join(cells.get(c, " ") for c in range(max(cells) + 1))
        return text.rstrip()

    def lines(self) -> list[str]:
        if not self.rows:
            return []
        return [self.line(r) for r in range(max(self.rows) + 1)]


class ScriptedKeys:
    """Key source that replays a fixed list of events."""

    def __init__(self, events: list[InputEvent]) -> None:
        self.events = list(events)
        self.started = 0
        self.stopped = 0

    def start(self) -> None:
        self.started += 1

    def read(self) -> InputEvent:
        if not self.events:
            raise AssertionError("element asked for more keys than scripted")
        return self.events.pop(0)

    def stop(self) -> None:
        self.stopped += 1


ENTER = InputEvent(key="Enter", char=None)
BACKSPACE = InputEvent(key="Backspace", char=None)
UP = InputEvent(key="Up", char=None)
DOWN = InputEvent(key="Down", char=None)
CTRL_C = InputEvent(key="c", char="c", ctrl=True)


def keys(text: str) -> list[InputEvent]:
    """One press event per character of text."""
    return [InputEvent(key=ch, char=ch) for ch in text]


def released(event: InputEvent) -> InputEvent:
    return InputEvent(
        key=event.key, char=event.char, ctrl=event.ctrl, kind=KeyEventKind.RELEASE
    )
