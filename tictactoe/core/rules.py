from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .state import Cell, Outcome, Side

# A board is packed into one integer: bits 0-8 hold X marks and bits 9-17 hold
# O marks, each indexed by ``Cell`` value.
BOARD_CELLS = 9
O_SHIFT = BOARD_CELLS
SIDE_MASK = (1 << BOARD_CELLS) - 1
EMPTY_BOARD = 0

WIN_LINES: Tuple[int, ...] = (
    0b000_000_111,  # top row
    0b000_111_000,  # middle row
    0b111_000_000,  # bottom row
    0b001_001_001,  # left column
    0b010_010_010,  # middle column
    0b100_100_100,  # right column
    0b100_010_001,  # top left to bottom right
    0b001_010_100,  # top right to bottom left
)

# Centre first, then corners, then edges.
MOVE_ORDER: Tuple[Cell, ...] = (
    Cell.MIDDLE_MIDDLE,
    Cell.TOP_LEFT,
    Cell.TOP_RIGHT,
    Cell.BOTTOM_LEFT,
    Cell.BOTTOM_RIGHT,
    Cell.TOP_MIDDLE,
    Cell.MIDDLE_LEFT,
    Cell.MIDDLE_RIGHT,
    Cell.BOTTOM_MIDDLE,
)

# Numeric keypad layout: 1 is the bottom left, 9 the top right.
KEYPAD_CELLS: Dict[int, Cell] = {
    1: Cell.BOTTOM_LEFT,
    2: Cell.BOTTOM_MIDDLE,
    3: Cell.BOTTOM_RIGHT,
    4: Cell.MIDDLE_LEFT,
    5: Cell.MIDDLE_MIDDLE,
    6: Cell.MIDDLE_RIGHT,
    7: Cell.TOP_LEFT,
    8: Cell.TOP_MIDDLE,
    9: Cell.TOP_RIGHT,
}


def cell_mask(cell: Cell) -> int:
    """Bits occupied by ``cell`` on either side."""
    return (1 << int(cell)) | (1 << (int(cell) + O_SHIFT))


def mark_bit(cell: Cell, side: Side) -> int:
    shift = int(cell) if side is Side.X else int(cell) + O_SHIFT
    return 1 << shift


def side_bits(board: int, side: Side) -> int:
    if side is Side.X:
        return board & SIDE_MASK
    return (board >> O_SHIFT) & SIDE_MASK


def occupied_bits(board: int) -> int:
    return (board | (board >> O_SHIFT)) & SIDE_MASK


def is_cell_empty(board: int, cell: Cell) -> bool:
    return board & cell_mask(cell) == EMPTY_BOARD


def occupant(board: int, cell: Cell) -> Optional[Side]:
    if board & mark_bit(cell, Side.X):
        return Side.X
    if board & mark_bit(cell, Side.O):
        return Side.O
    return None


def has_line(bits: int) -> bool:
    for line in WIN_LINES:
        if bits & line == line:
            return True
    return False


def evaluate_outcome(board: int) -> Optional[Outcome]:
    if has_line(side_bits(board, Side.X)):
        return Outcome.X_WIN
    if has_line(side_bits(board, Side.O)):
        return Outcome.O_WIN
    if occupied_bits(board) == SIDE_MASK:
        return Outcome.DRAW
    return None


def empty_cells(board: int) -> List[Cell]:
    occupied = occupied_bits(board)
    return [cell for cell in MOVE_ORDER if not occupied & (1 << int(cell))]


def count_marks(board: int, side: Side) -> int:
    return bin(side_bits(board, side)).count("1")
