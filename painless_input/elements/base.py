"""Base classes for interactive prompt elements.

This module provides the core abstractions:
- KeyEventKind: press / repeat / release
- InputEvent: Keyboard input event
- ActiveElement: An engine that owns the terminal until it returns a value
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .terminal import Terminal

T = TypeVar("T")


class KeyEventKind(Enum):
    """Kind of a key event, for backends that report more than presses."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass
class InputEvent:
    """A keyboard input event."""

    key: str  # 'Enter', 'Backspace', 'Up', 'Down', ... or the character
    char: str | None  # Printable character or None
    ctrl: bool = False
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS

    @property
    def printable(self) -> str | None:
        """The character to insert, or None if this is not a text key."""
        if self.ctrl or not self.char or not self.char.isprintable():
            return None
        return self.char


class ActiveElement(ABC, Generic[T]):
    """An interactive element with exclusive control of the terminal.

    Lifecycle:
        1. on_activate(terminal) - initial draw
        2. handle_input(event) -> (done, result), repeated
        3. on_deactivate() - cleanup, runs on every exit path

    Elements draw incrementally: each handled key repaints only what it
    changed, relative to where the cursor was left by the previous step.
    """

    terminal: Terminal

    def hides_cursor(self) -> bool:
        """Return True if the text cursor should be hidden while active."""
        return False

    def on_activate(self, terminal: Terminal) -> None:
        """Called when element becomes active."""
        self.terminal = terminal

    @abstractmethod
    def handle_input(self, event: InputEvent) -> tuple[bool, T | None]:
        """Handle input event.

        Returns:
            (done, result) - if done=True, element completes with result
        """
        ...

    def on_deactivate(self) -> None:
        """Called when element completes."""
        pass
