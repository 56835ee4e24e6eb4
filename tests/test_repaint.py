"""Tests for the relative erase helpers in painless_input/elements/repaint.py."""

from __future__ import annotations

from painless_input.elements.repaint import (
    ErrorAnnotation,
    erase_backward,
    erase_forward,
    show_error,
)
from painless_input.elements.terminal import ANSI, Terminal
from tests.fakes import Screen


def _drawn(text: str) -> tuple[Screen, Terminal]:
    screen = Screen()
    term = Terminal(screen)  # type: ignore[arg-type]
    term.write(text)
    return screen, term


class TestEraseBackward:
    def test_blanks_columns_left_of_cursor(self) -> None:
        screen, term = _drawn("abcdef")
        erase_backward(term, 3)
        assert screen.line() == "abc"
        assert screen.col == 3

    def test_zero_is_noop(self) -> None:
        screen, term = _drawn("abc")
        before = screen.raw
        erase_backward(term, 0)
        assert screen.raw == before
        assert screen.col == 3


class TestEraseForward:
    def test_blanks_columns_right_of_cursor_and_returns(self) -> None:
        screen, term = _drawn("abcdef")
        term.move_left(4)
        erase_forward(term, 2)
        assert screen.line() == "ab  ef"
        assert screen.col == 2

    def test_zero_is_noop(self) -> None:
        screen, term = _drawn("abc")
        before = screen.raw
        erase_forward(term, 0)
        assert screen.raw == before


class TestShowError:
    def test_draws_highlighted_and_steps_back(self) -> None:
        screen, term = _drawn("> ")
        annotation = ErrorAnnotation()
        show_error(term, "bad value", annotation)

        assert screen.line() == "> bad value"
        assert screen.col == 2
        assert annotation.length == len("bad value")
        assert ANSI.ERROR + "bad value" + ANSI.RESET in screen.raw

    def test_clear_blanks_message_and_resets_length(self) -> None:
        screen, term = _drawn("> ")
        annotation = ErrorAnnotation()
        show_error(term, "oops", annotation)
        annotation.clear(term)

        assert screen.line() == ">"
        assert screen.col == 2
        assert annotation.length == 0
        assert not annotation.shown

    def test_clear_without_error_writes_nothing(self) -> None:
        screen, term = _drawn("> ")
        before = screen.raw
        ErrorAnnotation().clear(term)
        assert screen.raw == before


class TestTerminalWrites:
    def test_every_write_flushes(self) -> None:
        screen = Screen()
        term = Terminal(screen)  # type: ignore[arg-type]
        term.write("a")
        term.move_left(1)
        term.write_styled("b", ANSI.BOLD)
        assert screen.flushes == 3

    def test_zero_moves_emit_nothing(self) -> None:
        screen = Screen()
        term = Terminal(screen)  # type: ignore[arg-type]
        term.move_left(0)
        term.move_up(0)
        term.move_down(0)
        assert screen.raw == ""
        assert screen.flushes == 0

    def test_cursor_visibility(self) -> None:
        screen = Screen()
        term = Terminal(screen)  # type: ignore[arg-type]
        term.hide_cursor()
        assert not screen.cursor_visible
        term.show_cursor()
        assert screen.cursor_visible


class TestVisualLen:
    def test_ascii(self) -> None:
        assert ANSI.visual_len("hello") == 5

    def test_escape_codes_take_no_space(self) -> None:
        assert ANSI.visual_len("\033[1m[x]\033[0m") == 3

    def test_wide_characters(self) -> None:
        assert ANSI.visual_len("你好") == 4
