"""Single value input prompt element.

Edits one line at the end of the prompt, parses it on Enter and validates
the parsed value. Errors are drawn inline where the text was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from ..validation import (
    ParseError,
    Parser,
    ValidationError,
    always_valid,
    check,
    parse_text,
)
from .base import ActiveElement, InputEvent
from .repaint import ErrorAnnotation, erase_backward, show_error
from .terminal import Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TextPrompt(ActiveElement[T], Generic[T]):
    """Line input returning a parsed and validated value.

    - Printable keys append to the buffer.
    - Backspace drops the last character.
    - Enter parses the buffer. A parse failure keeps the text so it can be
      fixed; a rejected value discards it.

    While an error is shown the buffer is not on screen. The next key that
    acts on the buffer removes the error and redraws the buffer first.
    """

    prompt: str = ""
    parse: Parser[T] = str  # type: ignore[assignment]
    validate: Callable[[T], str | None] = always_valid
    buffer: str = ""
    error: ErrorAnnotation = field(default_factory=ErrorAnnotation)

    def on_activate(self, terminal: Terminal) -> None:
        super().on_activate(terminal)
        terminal.write(self.prompt)

    def _dismiss_error(self) -> None:
        if self.error.shown:
            self.error.clear(self.terminal)
            self.terminal.write(self.buffer)

    def _reject(self, message: str) -> None:
        erase_backward(self.terminal, len(self.buffer))
        show_error(self.terminal, message, self.error)

    def _submit(self) -> tuple[bool, T | None]:
        try:
            value = parse_text(self.parse, self.buffer)
        except ParseError as exc:
            logger.debug("parse failed for %r", self.buffer)
            self._reject(exc.message)
            return (False, None)
        try:
            check(self.validate, value)
        except ValidationError as exc:
            logger.debug("value %r rejected: %s", value, exc.message)
            self._reject(exc.message)
            self.buffer = ""
            return (False, None)
        logger.debug("accepted %r", value)
        return (True, value)

    def handle_input(self, event: InputEvent) -> tuple[bool, T | None]:
        if not event.is_press:
            return (False, None)
        if event.key == "Enter":
            self._dismiss_error()
            return self._submit()
        if event.key == "Backspace":
            if self.buffer:
                self._dismiss_error()
                self.buffer = self.buffer[:-1]
                erase_backward(self.terminal, 1)
            return (False, None)
        ch = event.printable
        if ch is not None:
            self._dismiss_error()
            self.buffer += ch
            self.terminal.write(ch)
        return (False, None)
