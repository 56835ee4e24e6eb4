"""Array input prompt element.

Renders as ``<prompt>[1, 2, 3]`` built one element at a time:
- ``[`` is drawn up front
- Enter on a non-empty element parses it and draws ``, ``
- Enter on an empty element closes the list with ``]`` and validates it
- Backspace on an empty element removes the previous element

The predicate sees the whole list. A rejected list is wiped from the
screen and typed again from scratch.
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

SEPARATOR = ", "


@dataclass
class ArrayPrompt(ActiveElement[list[T]], Generic[T]):
    """List input returning parsed elements once the whole list is valid.

    ``items`` and ``raw_items`` grow and shrink together; ``raw_items`` keeps
    the text of each element so undo knows how many columns to erase.
    """

    prompt: str = ""
    parse: Parser[T] = str  # type: ignore[assignment]
    validate: Callable[[list[T]], str | None] = always_valid
    current_input: str = ""
    items: list[T] = field(default_factory=list)
    raw_items: list[str] = field(default_factory=list)
    error: ErrorAnnotation = field(default_factory=ErrorAnnotation)

    def on_activate(self, terminal: Terminal) -> None:
        super().on_activate(terminal)
        terminal.write(self.prompt + "[")

    def _dismiss_error(self) -> None:
        if self.error.shown:
            self.error.clear(self.terminal)
            self.terminal.write(self.current_input)

    def drawn_width(self) -> int:
        """Columns drawn after ``[`` once the list is closed with ``]``."""
        separators = len(SEPARATOR) * max(len(self.raw_items) - 1, 0)
        return 1 + sum(len(raw) for raw in self.raw_items) + separators

    def _confirm_element(self) -> None:
        try:
            value = parse_text(self.parse, self.current_input)
        except ParseError as exc:
            logger.debug("element parse failed for %r", self.current_input)
            erase_backward(self.terminal, len(self.current_input))
            show_error(self.terminal, exc.message, self.error)
            return
        self.items.append(value)
        self.raw_items.append(self.current_input)
        self.current_input = ""
        self.terminal.write(SEPARATOR)

    def _undo_element(self) -> None:
        self.error.clear(self.terminal)
        self.items.pop()
        raw = self.raw_items.pop()
        logger.debug("removed element %r", raw)
        erase_backward(self.terminal, len(SEPARATOR) + len(raw))

    def _close(self) -> tuple[bool, list[T] | None]:
        if self.raw_items:
            erase_backward(self.terminal, len(SEPARATOR))
        self.terminal.write("]")
        try:
            check(self.validate, self.items)
        except ValidationError as exc:
            logger.debug("list %r rejected: %s", self.items, exc.message)
            erase_backward(self.terminal, self.drawn_width())
            show_error(self.terminal, exc.message, self.error)
            self.items = []
            self.raw_items = []
            self.current_input = ""
            return (False, None)
        logger.debug("accepted %r", self.items)
        return (True, self.items)

    def handle_input(self, event: InputEvent) -> tuple[bool, list[T] | None]:
        if not event.is_press:
            return (False, None)
        if event.key == "Enter":
            self._dismiss_error()
            if self.current_input:
                self._confirm_element()
                return (False, None)
            return self._close()
        if event.key == "Backspace":
            if self.current_input:
                self._dismiss_error()
                self.current_input = self.current_input[:-1]
                erase_backward(self.terminal, 1)
            elif self.items:
                self._undo_element()
            return (False, None)
        ch = event.printable
        if ch is not None:
            self._dismiss_error()
            self.current_input += ch
            self.terminal.write(ch)
        return (False, None)
