"""Named starting positions for the board."""

from __future__ import annotations

from enum import Enum, auto

from .pieces import Box, BoxType, Color, Piece, SpecialType

_DRAW_ORDER = (Color.YELLOW, Color.BLUE, Color.RED, Color.GREEN)


class BoardConfig(Enum):
    """Starting layouts of the pieces."""

    ALL_AT_HOME = auto()
    ALL_AT_GOAL = auto()
    DRAW_ONE_PIECE = auto()
    DRAW_TWO_PIECES = auto()
    CORRIDORS_ONE_PIECE = auto()
    CORRIDORS_TWO_PIECES = auto()
    GROUPED = auto()
    GROUPED2 = auto()
    GROUPED_LEGACY = auto()
    TEST_BOO = auto()
    TEST_BOOM = auto()
    TEST_MUSHROOM = auto()
    TEST_SIZES = auto()
    CHANGE_SIZE = auto()
    PLAYGROUND = auto()
    ALTERNED = auto()
    ALMOST_GOAL = auto()
    DEBUG = auto()


def _on_squares(color: Color, *nums: int) -> list[Piece]:
    return [Piece(color, Box(n, BoxType.NORMAL, Color.NONE)) for n in nums]


def _home_and(color: Color, *nums: int) -> list[Piece]:
    return [Piece(color, Box(0, BoxType.HOME, color))] + _on_squares(color, *nums)


def _sized(color: Color, *spec: tuple[int, SpecialType]) -> list[Piece]:
    return [Piece(color, Box(n, BoxType.NORMAL, Color.NONE), kind, 3) for n, kind in spec]


def _on_normal_boxes(one: bool) -> dict[Color, list[Piece]]:
    starts = (1, 18, 35, 52)
    copies = 1 if one else 2
    return {
        color: [
            Piece(color, Box(n, BoxType.NORMAL, Color.NONE))
            for n in range(start, start + 17)
            for _ in range(copies)
        ]
        for color, start in zip(_DRAW_ORDER, starts)
    }


def _on_home_or_goal(at_home: bool) -> dict[Color, list[Piece]]:
    kind = BoxType.HOME if at_home else BoxType.GOAL
    return {color: [Piece(color, Box(0, kind, color)) for _ in range(4)] for color in _DRAW_ORDER}


def _on_corridors(one: bool) -> dict[Color, list[Piece]]:
    copies = 1 if one else 2
    return {
        color: [
            Piece(color, Box(n, BoxType.FINAL_QUEUE, color))
            for n in range(1, 8)
            for _ in range(copies)
        ]
        for color in _DRAW_ORDER
    }


def _crowded(yellow: list[Piece]) -> dict[Color, list[Piece]]:
    return {
        Color.RED: _on_squares(Color.RED, 24, 24, 25, 25),
        Color.GREEN: _on_squares(Color.GREEN, 21, 21, 22, 23),
        Color.BLUE: _on_squares(Color.BLUE, 18, 19, 20, 20),
        Color.YELLOW: yellow,
    }


def _boo_layout() -> dict[Color, list[Piece]]:
    return {
        Color.GREEN: _home_and(Color.GREEN, 16, 15, 68),
        Color.RED: _home_and(Color.RED, 18, 47, 51),
        Color.BLUE: _home_and(Color.BLUE, 19, 21, 34),
        Color.YELLOW: _home_and(Color.YELLOW, 20, 13, 17),
    }


def _build(config: BoardConfig) -> dict[Color, list[Piece]]:
    small, mega, normal = SpecialType.SMALL, SpecialType.MEGA, SpecialType.NORMAL
    if config is BoardConfig.DRAW_TWO_PIECES:
        return _on_normal_boxes(False)
    if config is BoardConfig.DRAW_ONE_PIECE:
        return _on_normal_boxes(True)
    if config is BoardConfig.ALL_AT_HOME:
        return _on_home_or_goal(True)
    if config is BoardConfig.ALL_AT_GOAL:
        return _on_home_or_goal(False)
    if config is BoardConfig.CORRIDORS_ONE_PIECE:
        return _on_corridors(True)
    if config is BoardConfig.CORRIDORS_TWO_PIECES:
        return _on_corridors(False)
    if config is BoardConfig.GROUPED:
        return {
            Color.GREEN: _on_squares(Color.GREEN, 55, 64, 68),
            Color.RED: _on_squares(Color.RED, 38, 47, 51),
            Color.BLUE: _on_squares(Color.BLUE, 21, 30, 34),
            Color.YELLOW: _on_squares(Color.YELLOW, 4, 13, 17),
        }
    if config is BoardConfig.GROUPED2:
        return {
            Color.GREEN: _on_squares(Color.GREEN, 55, 64),
            Color.RED: _on_squares(Color.RED, 38, 47),
            Color.BLUE: _on_squares(Color.BLUE, 21, 30),
            Color.YELLOW: _on_squares(Color.YELLOW, 4, 13),
        }
    if config is BoardConfig.GROUPED_LEGACY:
        return {
            Color.GREEN: _home_and(Color.GREEN, 55, 64, 68),
            Color.RED: _home_and(Color.RED, 38, 47, 51),
            Color.BLUE: _home_and(Color.BLUE, 21, 30, 34),
            Color.YELLOW: _home_and(Color.YELLOW, 4, 13, 17),
        }
    if config in (BoardConfig.TEST_BOO, BoardConfig.CHANGE_SIZE):
        return _boo_layout()
    if config in (BoardConfig.TEST_BOOM, BoardConfig.TEST_MUSHROOM):
        return _crowded(_home_and(Color.YELLOW, 4, 13, 16))
    if config is BoardConfig.TEST_SIZES:
        return {
            Color.RED: _sized(Color.RED, (1, normal), (4, small), (4, small), (7, mega)),
            Color.GREEN: _sized(Color.GREEN, (9, mega), (11, small), (13, small), (15, mega)),
            Color.BLUE: _sized(Color.BLUE, (17, mega), (19, small), (21, small), (23, mega)),
            Color.YELLOW: _sized(Color.YELLOW, (25, mega), (27, small), (29, small), (31, mega)),
        }
    if config is BoardConfig.PLAYGROUND:
        return _crowded(_on_squares(Color.YELLOW, 13, 14, 15, 16))
    # ALTERNED, ALMOST_GOAL and DEBUG define no layout.
    return {}


def pieces_for_config(config: BoardConfig) -> dict[Color, list[Piece]]:
    """Return fresh pieces for ``config``, keyed by colour in colour order."""
    pieces = _build(config)
    return {color: pieces[color] for color in sorted(pieces)}