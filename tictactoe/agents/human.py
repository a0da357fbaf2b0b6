from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from tictactoe.core import KEYPAD_CELLS, Cell, Position

from .base import Agent, AgentError


class InputClosedError(AgentError):
    pass


def parse_keypad(text: str) -> Cell:
    """Translate keypad digits (1 bottom left ... 9 top right) into a cell."""
    value = text.strip()
    if not value.isdigit():
        raise ValueError(f"invalid digit found in string: {value!r}")
    number = int(value)
    if number not in KEYPAD_CELLS:
        raise ValueError("number entered is not within the acceptable range")
    return KEYPAD_CELLS[number]


class HumanAgent(Agent):
    """Reads moves typed on the console until one names an empty cell."""

    name = "user"

    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        errors: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._read_line = read_line or sys.stdin.readline
        self._errors = errors
        self._output = output

    def get_move(self, position: Position) -> Cell:
        empty = set(position.legal_moves())
        while True:
            cell = self._read_cell()
            if cell in empty:
                return cell
            print(f"{cell!s} square is not empty", file=self._output or sys.stdout)

    def _read_cell(self) -> Cell:
        while True:
            line = self._read_line()
            if not line:
                raise InputClosedError("input stream closed before a move was entered")
            try:
                return parse_keypad(line)
            except ValueError as exc:
                self._report(str(exc))
            self._report("please try again with a number between 1 and 9")

    def _report(self, message: str) -> None:
        print(message, file=self._errors or sys.stderr)
