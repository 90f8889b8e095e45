"""The board: every piece's position plus traps and special items."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .board_configs import BoardConfig, pieces_for_config
from .pieces import Box, Color, Piece, SpecialType


class TrapType(Enum):
    """Kinds of trap that can lie on a square."""

    BANANA = "banana_trap"


@dataclass(frozen=True)
class BoardTrap:
    """A trap of a given kind placed on a square."""

    type: TrapType
    box: Box


class Board:
    """Pieces of every colour, with the traps and items lying on the board."""

    def __init__(
        self,
        config: BoardConfig | Mapping[Color, list[Piece]] | None = BoardConfig.ALL_AT_HOME,
    ):
        if config is None:
            config = BoardConfig.ALL_AT_HOME
        if isinstance(config, BoardConfig):
            self.pieces: dict[Color, list[Piece]] = pieces_for_config(config)
        else:
            self.pieces = {color: [_copy.copy(p) for p in stack] for color, stack in config.items()}
        self.traps: list[BoardTrap] = []
        self.special_items: list[Any] = []

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Board) and self.pieces == other.pieces

    def __repr__(self) -> str:
        return f"Board({self.pieces!r})"

    def piece(self, color: Color, idx: int) -> Piece:
        return self.pieces[color][idx]

    def pieces_of(self, color: Color) -> list[Piece]:
        return self.pieces[color]

    def set_piece_type(self, color: Color, idx: int, piece_type: SpecialType) -> None:
        self.pieces[color][idx].type = piece_type

    def set_piece_turns_left(self, color: Color, idx: int, turns_left: int) -> None:
        self.pieces[color][idx].turns_left = turns_left

    def decrease_piece_turns_left(self, color: Color, idx: int) -> None:
        """Count down one turn of the piece's special state, never below zero."""
        piece = self.pieces[color][idx]
        piece.turns_left = max(piece.turns_left - 1, 0)

    def move_piece(self, color: Color, idx: int, box: Box) -> None:
        self.pieces[color][idx].box = box

    def add_trap(self, trap_type: TrapType, box: Box) -> None:
        self.traps.append(BoardTrap(trap_type, box))

    def delete_trap(self, box: Box) -> None:
        """Remove the first trap lying on ``box``."""
        for pos, trap in enumerate(self.traps):
            if trap.box == box:
                del self.traps[pos]
                return
        raise ValueError(f"no trap on {box}")

    def delete_special_item(self, pos: int) -> None:
        del self.special_items[pos]

    def copy(self) -> "Board":
        clone = Board(self.pieces)
        clone.traps = list(self.traps)
        clone.special_items = _copy.deepcopy(self.special_items)
        return clone