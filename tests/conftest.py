"""Pytest configuration for local test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()

from painless_input.elements import ElementManager, InputEvent, Terminal  # noqa: E402
from tests.fakes import Screen, ScriptedKeys  # noqa: E402


@pytest.fixture
def screen() -> Screen:
    return Screen()


@pytest.fixture
def make_manager(
    screen: Screen,
) -> Callable[[list[InputEvent]], ElementManager]:
    """Build an ElementManager drawing on ``screen`` and replaying events."""

    def _make(events: list[InputEvent]) -> ElementManager:
        return ElementManager(
            terminal=Terminal(screen),  # type: ignore[arg-type]
            reader=ScriptedKeys(events),
            interrupt_on_ctrl_c=True,
        )

    return _make
