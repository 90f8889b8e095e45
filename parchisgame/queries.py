"""Questions about the occupation of the board: walls, traps and pieces on a path."""

from __future__ import annotations

from typing import Iterator

from .board import Board, BoardTrap
from .geometry import BOARD_SIZE, FINAL_BOXES, SAFE_BOXES
from .pieces import Box, BoxType, Color, SpecialType

_SCAN_ORDER = tuple(color for color in Color if color is not Color.NONE)


def _path_end(box: Box) -> int:
    """Normal square a path towards ``box`` ends on."""
    if box.type in (BoxType.FINAL_QUEUE, BoxType.GOAL):
        return FINAL_BOXES[box.col]
    return box.num


def _squares_on_path(box1: Box, box2: Box, first: int) -> Iterator[int]:
    """Normal squares from ``first`` up to and including the end of the path."""
    if box1.type is not BoxType.NORMAL:
        return
    end = _path_end(box2)
    if end == box1.num:
        return
    square = first
    for _ in range(BOARD_SIZE + 1):
        yield square
        if square == end:
            return
        square = square % BOARD_SIZE + 1


class BoardQueries:
    """Read-only questions about the pieces standing on ``board``."""

    def __init__(self, board: Board):
        self.board = board

    def box_state(self, box: Box) -> list[tuple[Color, int]]:
        """Pieces standing on ``box`` as ``(colour, index)`` pairs."""
        return [
            (color, idx)
            for color in _SCAN_ORDER
            for idx, piece in enumerate(self.board.pieces.get(color, ()))
            if piece.box == box
        ]

    def pieces_at_goal(self, color: Color) -> int:
        return len(self.box_state(Box(0, BoxType.GOAL, color)))

    def pieces_at_home(self, color: Color) -> int:
        return len(self.box_state(Box(0, BoxType.HOME, color)))

    def is_safe_box(self, box: Box) -> bool:
        return box.type is BoxType.NORMAL and box.num in SAFE_BOXES

    def is_safe_piece(self, color: Color, piece: int) -> bool:
        return self.is_safe_box(self.board.piece(color, piece).box)

    def is_wall(self, box: Box) -> Color:
        """Colour of the wall built on ``box``, or ``Color.NONE``."""
        if box.type in (BoxType.HOME, BoxType.GOAL):
            return Color.NONE
        occupation = self.box_state(box)
        if len(occupation) != 2 or occupation[0][0] != occupation[1][0]:
            return Color.NONE
        breaking = (SpecialType.BOO, SpecialType.SMALL)
        if any(self.board.piece(c, i).type in breaking for c, i in occupation):
            return Color.NONE
        return occupation[0][0]

    def any_wall(self, box1: Box, box2: Box) -> list[Color]:
        """Colours of the walls on the way from ``box1`` to ``box2``."""
        walls = (self.is_wall(Box(sq)) for sq in _squares_on_path(box1, box2, box1.num % BOARD_SIZE + 1))
        return [c for c in walls if c is not Color.NONE]

    def is_mega_wall(self, box: Box) -> Color:
        """Colour of a lone mega piece on ``box``, or ``Color.NONE``."""
        if box.type in (BoxType.HOME, BoxType.GOAL):
            return Color.NONE
        occupation = self.box_state(box)
        if len(occupation) == 1 and self.board.piece(*occupation[0]).type is SpecialType.MEGA:
            return occupation[0][0]
        return Color.NONE

    def any_mega_wall(self, box1: Box, box2: Box) -> list[Color]:
        walls = (
            self.is_mega_wall(Box(sq))
            for sq in _squares_on_path(box1, box2, box1.num % BOARD_SIZE + 1)
        )
        return [c for c in walls if c is not Color.NONE]

    def any_trap(self, box1: Box, box2: Box) -> list[BoardTrap]:
        """Traps lying on the way from ``box1`` to ``box2``."""
        return [
            trap
            for sq in _squares_on_path(box1, box2, box1.num % BOARD_SIZE + 1)
            for trap in self.board.traps
            if trap.box == Box(sq)
        ]

    def all_pieces_between(self, box1: Box, box2: Box) -> list[tuple[Color, int]]:
        """Pieces on the squares after ``box1`` up to and including ``box2``."""
        return [
            occupant
            for sq in _squares_on_path(box1, box2, box1.num + 1)
            for occupant in self.box_state(Box(sq))
        ]