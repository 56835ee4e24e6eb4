"""Interactive prompt elements.

Each element is one engine that owns the terminal until it returns:

    from painless_input.elements import ElementManager, TextPrompt

    manager = ElementManager()
    age = manager.run(TextPrompt(prompt="Age: ", parse=int))
"""

from .array_prompt import ArrayPrompt
from .base import ActiveElement, InputEvent, KeyEventKind
from .manager import ElementManager, KeySource
from .menu_select import CheckboxSelect, MenuSelect
from .repaint import ErrorAnnotation, erase_backward, erase_forward, show_error
from .terminal import ANSI, RawInputReader, Terminal
from .text_prompt import TextPrompt

__all__ = [
    # Base
    "ActiveElement",
    "InputEvent",
    "KeyEventKind",
    # Manager
    "ElementManager",
    "KeySource",
    # Terminal
    "ANSI",
    "Terminal",
    "RawInputReader",
    # Repaint
    "ErrorAnnotation",
    "erase_backward",
    "erase_forward",
    "show_error",
    # Elements
    "TextPrompt",
    "ArrayPrompt",
    "MenuSelect",
    "CheckboxSelect",
]
