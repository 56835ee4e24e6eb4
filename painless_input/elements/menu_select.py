"""Menu selection elements.

MenuSelect picks one option inline:

    Choose an option: [Option 3]⭥

CheckboxSelect toggles any number of options, one per line, and finishes
on a submit line:

    Pick toppings:
    ☑ Cheese
    ☐ Olives
    ✓ Done
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .base import ActiveElement, InputEvent
from .repaint import erase_forward
from .terminal import ANSI, Terminal

logger = logging.getLogger(__name__)

UP_DOWN_ARROW = "⭥"
CONFIRM_TICK = "✓"
# Must be the same width
SELECTED = "☑"
UNSELECTED = "☐"


@dataclass
class MenuSelect(ActiveElement[int]):
    """Inline one-of-N selection with arrow keys.

    Up/Down move the highlight and stop at either end. Enter returns the
    index of the highlighted option.
    """

    prompt: str = ""
    options: Sequence[Any] = field(default_factory=list)
    selected: int = 0
    _labels: list[str] = field(default_factory=list, init=False, repr=False)
    _clear_width: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("MenuSelect needs at least one option")
        self._labels = [str(option) for option in self.options]
        widest = max(ANSI.visual_len(label) for label in self._labels)
        # option + "]" + indicator
        self._clear_width = widest + 1 + ANSI.visual_len(UP_DOWN_ARROW)

    def hides_cursor(self) -> bool:
        return True

    def _option_text(self) -> str:
        return f"{self._labels[self.selected]}]{UP_DOWN_ARROW}{ANSI.RESET}"

    def on_activate(self, terminal: Terminal) -> None:
        super().on_activate(terminal)
        terminal.write(f"{self.prompt}{ANSI.BOLD}[{self._option_text()}")

    def _redraw(self, previous: int) -> None:
        # Step back to just after "[" so only the option is repainted.
        drawn = ANSI.visual_len(self._labels[previous]) + 1 + ANSI.visual_len(UP_DOWN_ARROW)
        self.terminal.move_left(drawn)
        erase_forward(self.terminal, self._clear_width)
        self.terminal.write(ANSI.BOLD + self._option_text())

    def handle_input(self, event: InputEvent) -> tuple[bool, int | None]:
        if not event.is_press:
            return (False, None)
        if event.key == "Enter":
            logger.debug("selected option %d", self.selected)
            return (True, self.selected)
        previous = self.selected
        if event.key == "Up":
            self.selected = max(self.selected - 1, 0)
        elif event.key == "Down":
            self.selected = min(self.selected + 1, len(self._labels) - 1)
        if self.selected != previous:
            self._redraw(previous)
        return (False, None)


@dataclass
class CheckboxSelect(ActiveElement[list[bool]]):
    """Checkbox list with a submit line.

    The cursor runs over the options and then the submit line, wrapping at
    both ends. Enter on an option toggles it; Enter on the submit line
    returns one boolean per option.
    """

    prompt: str = ""
    submit_label: str = "Done"
    options: Sequence[str] = field(default_factory=list)
    cursor: int = 0
    selections: list[bool] = field(default_factory=list)
    _row: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.selections:
            self.selections = [False] * len(self.options)
        elif len(self.selections) != len(self.options):
            raise ValueError("selections must have one entry per option")

    def hides_cursor(self) -> bool:
        return True

    @property
    def submit_index(self) -> int:
        return len(self.options)

    def line(self, index: int) -> str:
        glyph = SELECTED if self.selections[index] else UNSELECTED
        return f"{glyph} {self.options[index]}"

    def on_activate(self, terminal: Terminal) -> None:
        super().on_activate(terminal)
        terminal.write_styled(self.prompt.strip(), ANSI.BOLD)
        terminal.newline()
        # Make room for every option below this line so moving the cursor
        # down never runs off the bottom of the screen.
        rows = len(self.options)
        terminal.write("\r\n" * rows + ANSI.cursor_up(rows))
        self._row = 0
        self.render()

    def render(self) -> None:
        """Repaint every line, then park the cursor on the active line."""
        term = self.terminal
        term.move_up(self._row)
        for i in range(len(self.options)):
            term.carriage_return()
            if i == self.cursor:
                term.write_styled(self.line(i), ANSI.UNDERLINE)
            else:
                term.write(self.line(i))
            term.move_down(1)
        term.carriage_return()
        style = ANSI.BOLD_UNDERLINE if self.cursor == self.submit_index else ANSI.BOLD
        term.write_styled(f"{CONFIRM_TICK} {self.submit_label}", style)
        term.move_up(self.submit_index - self.cursor)
        term.carriage_return()
        self._row = self.cursor

    def handle_input(self, event: InputEvent) -> tuple[bool, list[bool] | None]:
        if not event.is_press:
            return (False, None)
        if event.key == "Enter":
            if self.cursor == self.submit_index:
                logger.debug("submitted %r", self.selections)
                return (True, list(self.selections))
            self.selections[self.cursor] = not self.selections[self.cursor]
        elif event.key == "Down":
            self.cursor = 0 if self.cursor == self.submit_index else self.cursor + 1
        elif event.key == "Up":
            self.cursor = self.submit_index if self.cursor == 0 else self.cursor - 1
        else:
            return (False, None)
        self.render()
        return (False, None)
