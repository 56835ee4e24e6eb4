"""Runs an element's input loop against a terminal and a key source."""

from __future__ import annotations

import logging
from typing import Any, Protocol, TypeVar

from .. import config
from .base import ActiveElement, InputEvent
from .terminal import RawInputReader, Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeySource(Protocol):
    """Anything that can be started, read from and stopped like RawInputReader."""

    def start(self) -> None: ...

    def read(self) -> InputEvent: ...

    def stop(self) -> None: ...


class ElementManager:
    """Owns the terminal for the lifetime of one element.

    - Enters raw mode before the first draw and restores it on every exit
    - Hides the text cursor for elements that ask for it
    - Feeds key events to the element until it reports completion
    - Raises KeyboardInterrupt on Ctrl+C (raw mode swallows SIGINT)
    """

    def __init__(
        self,
        terminal: Terminal | None = None,
        reader: KeySource | None = None,
        interrupt_on_ctrl_c: bool | None = None,
    ) -> None:
        self.terminal = terminal or Terminal()
        self._reader = reader
        self._interrupt_on_ctrl_c = (
            config.CTRL_C_INTERRUPTS
            if interrupt_on_ctrl_c is None
            else interrupt_on_ctrl_c
        )
        self._active: ActiveElement[Any] | None = None

    def _ensure_reader(self) -> KeySource:
        """Lazily initialize input reader."""
        if self._reader is None:
            self._reader = RawInputReader()
        return self._reader

    def run(self, element: ActiveElement[T]) -> T:
        """Run an element until it returns a result."""
        if self._active is not None:
            raise RuntimeError("Another element is already active")

        reader = self._ensure_reader()
        reader.start()
        self._active = element
        hidden = False
        try:
            if element.hides_cursor():
                self.terminal.hide_cursor()
                hidden = True
            element.on_activate(self.terminal)
            logger.debug("%s activated", type(element).__name__)

            while True:
                event = reader.read()
                if self._interrupt_on_ctrl_c and event.ctrl and event.char == "c":
                    logger.debug("interrupted by Ctrl+C")
                    raise KeyboardInterrupt
                done, result = element.handle_input(event)
                if done:
                    return result  # type: ignore[return-value]
        finally:
            try:
                element.on_deactivate()
                if hidden:
                    self.terminal.show_cursor()
            finally:
                reader.stop()
                self._active = None
