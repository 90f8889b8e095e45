"""Colours, boxes and pieces of the parchís board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Color(IntEnum):
    """Piece colours. The numeric order is the board's scanning order."""

    BLUE = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    NONE = 4


class BoxType(Enum):
    """Kind of square a piece can stand on."""

    NORMAL = "normal"
    HOME = "home"
    FINAL_QUEUE = "final_queue"
    GOAL = "goal"


class SpecialType(Enum):
    """Temporary state of a piece."""

    NORMAL = "normal_piece"
    STAR = "star_piece"
    BANANED = "bananed_piece"
    MEGA = "mega_piece"
    SMALL = "small_piece"
    BOO = "boo_piece"


_PARTNERS = {
    Color.YELLOW: Color.GREEN,
    Color.GREEN: Color.YELLOW,
    Color.BLUE: Color.RED,
    Color.RED: Color.BLUE,
    Color.NONE: Color.NONE,
}


def partner_color(color: Color) -> Color:
    """Return the colour played by the same player as ``color``."""
    return _PARTNERS[color]


@dataclass(frozen=True)
class Box:
    """A square: its number, its kind and, for coloured squares, its colour."""

    num: int
    type: BoxType = BoxType.NORMAL
    col: Color = Color.NONE


@dataclass
class Piece:
    """A piece with its position and any special state it carries."""

    color: Color
    box: Box
    type: SpecialType = SpecialType.NORMAL
    turns_left: int = 0