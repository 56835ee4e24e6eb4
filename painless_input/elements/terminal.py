"""Low-level terminal primitives.

This module provides:
- ANSI: escape sequence constants and width helpers
- Terminal: styled writes and relative cursor movement on an output stream
- RawInputReader: blocking key reader built on prompt_toolkit's input layer

All cursor movement is relative. There is no absolute-position query, so
every caller is responsible for knowing where the cursor is.
"""

from __future__ import annotations

import logging
import re
import select
import sys
from collections import deque
from typing import TYPE_CHECKING, Any, Iterable, TextIO

from prompt_toolkit.input import create_input
from prompt_toolkit.keys import Keys
from wcwidth import wcwidth

from .. import config
from .base import InputEvent

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from prompt_toolkit.key_binding import KeyPress

logger = logging.getLogger(__name__)


class ANSI:
    """ANSI escape codes used by the prompts."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"
    BOLD_UNDERLINE = "\033[1;4m"
    # Red background, red underlined text
    ERROR = "\033[41;31;4m"

    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"

    # CSI sequences end with a byte in the 0x40-0x7E range
    _CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

    @staticmethod
    def cursor_left(n: int) -> str:
        return f"\033[{n}D" if n > 0 else ""

    @staticmethod
    def cursor_up(n: int) -> str:
        return f"\033[{n}A" if n > 0 else ""

    @staticmethod
    def cursor_down(n: int) -> str:
        return f"\033[{n}B" if n > 0 else ""

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove CSI escape sequences from text."""
        return cls._CSI_RE.sub("", text)

    @classmethod
    def visual_len(cls, text: str) -> int:
        """Number of terminal columns text occupies.

        Escape sequences take no space, wide characters take two columns and
        non-printable characters are counted as zero.
        """
        width = 0
        for ch in cls.strip_ansi(text):
            w = wcwidth(ch)
            if w > 0:
                width += w
        return width


class Terminal:
    """Writes text and cursor movements to an output stream.

    Every public method is one logical write and flushes before returning.
    When no stream is given, ``sys.stdout`` is looked up at write time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, data: str) -> None:
        if not data:
            return
        out = self.stream
        out.write(data)
        out.flush()

    def write(self, text: str) -> None:
        """Write literal text at the cursor."""
        self._emit(text)

    def write_styled(self, text: str, style: str) -> None:
        """Write text wrapped in an SGR style and a reset."""
        self._emit(f"{style}{text}{ANSI.RESET}")

    def move_left(self, n: int) -> None:
        self._emit(ANSI.cursor_left(n))

    def move_up(self, n: int) -> None:
        self._emit(ANSI.cursor_up(n))

    def move_down(self, n: int) -> None:
        self._emit(ANSI.cursor_down(n))

    def carriage_return(self) -> None:
        self._emit("\r")

    def newline(self) -> None:
        self._emit("\r\n")

    def hide_cursor(self) -> None:
        self._emit(ANSI.HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._emit(ANSI.SHOW_CURSOR)


# prompt_toolkit key -> our key name. Enter/Backspace/Tab are aliases of
# the control keys prompt_toolkit reports for them.
_KEY_NAMES: dict[Keys, str] = {
    Keys.ControlM: "Enter",
    Keys.ControlJ: "Enter",
    Keys.ControlH: "Backspace",
    Keys.ControlI: "Tab",
    Keys.Up: "Up",
    Keys.Down: "Down",
    Keys.Left: "Left",
    Keys.Right: "Right",
    Keys.Escape: "Escape",
    Keys.Delete: "Delete",
}


def _normalize_paste(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", " ")


def translate_key_press(key_press: KeyPress) -> list[InputEvent]:
    """Convert one prompt_toolkit key press into input events.

    Bracketed pastes expand into one event per character. Keys with no
    meaning for the prompts produce no events.
    """
    key: Any = key_press.key
    if key == Keys.BracketedPaste:
        return [
            InputEvent(key=ch, char=ch)
            for ch in _normalize_paste(key_press.data)
            if ch.isprintable()
        ]
    if isinstance(key, Keys):
        name = _KEY_NAMES.get(key)
        if name is not None:
            return [InputEvent(key=name, char=None)]
        value = key.value
        # "c-a" .. "c-z"
        if value.startswith("c-") and len(value) == 3 and value[2].isalpha():
            return [InputEvent(key=value[2], char=value[2], ctrl=True)]
        return []
    if isinstance(key, str) and key:
        return [InputEvent(key=key, char=key)]
    return []


class RawInputReader:
    """Blocking key reader with scoped raw mode.

    Usage:
        reader = RawInputReader()
        reader.start()       # enter raw mode
        try:
            event = reader.read()
        finally:
            reader.stop()    # restore terminal mode
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        escape_timeout: float | None = None,
        pt_input: Input | None = None,
    ) -> None:
        self._stdin = stdin
        self._given_input = pt_input
        self._escape_timeout = (
            config.ESCAPE_TIMEOUT if escape_timeout is None else escape_timeout
        )
        self._input: Input | None = None
        self._raw_mode_ctx: Any = None
        self._pending: deque[InputEvent] = deque()

    def start(self) -> None:
        """Create the input and switch it to raw mode."""
        if self._input is not None:
            return
        if self._given_input is not None:
            self._input = self._given_input
        else:
            self._input = create_input(self._stdin)
        self._raw_mode_ctx = self._input.raw_mode()
        self._raw_mode_ctx.__enter__()
        logger.debug("raw mode entered")

    def stop(self) -> None:
        """Restore the terminal mode and release the input."""
        try:
            if self._raw_mode_ctx is not None:
                self._raw_mode_ctx.__exit__(None, None, None)
                logger.debug("raw mode restored")
        finally:
            self._raw_mode_ctx = None
            if self._input is not None and self._input is not self._given_input:
                self._input.close()
            self._input = None
            self._pending.clear()

    def _wait_readable(self, timeout: float | None) -> bool:
        assert self._input is not None
        ready, _, _ = select.select([self._input.fileno()], [], [], timeout)
        return bool(ready)

    def _queue(self, key_presses: Iterable[KeyPress]) -> None:
        for key_press in key_presses:
            self._pending.extend(translate_key_press(key_press))

    def read(self) -> InputEvent:
        """Block until the next key event is available."""
        if self._input is None:
            raise RuntimeError("RawInputReader.read() called before start()")
        while not self._pending:
            self._wait_readable(None)
            self._queue(self._input.read_keys())
            if not self._pending and self._input.closed:
                raise EOFError("terminal input closed")
            # An escape byte stays in the parser until we know whether a
            # sequence follows it.
            if not self._pending and not self._wait_readable(self._escape_timeout):
                self._queue(self._input.flush_keys())
        return self._pending.popleft()

    def __enter__(self) -> "RawInputReader":
        self.start()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()
