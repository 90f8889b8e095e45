"""Board geometry: entry and exit squares and distances between squares."""

from __future__ import annotations

from .pieces import Box, BoxType, Color, Piece

SAFE_BOXES = (4, 13, 17, 21, 30, 34, 38, 47, 51, 55, 64, 68)
"""Normal squares where pieces cannot be eaten."""

GAME_COLORS = (Color.YELLOW, Color.BLUE, Color.RED, Color.GREEN)

FINAL_BOXES = {
    Color.YELLOW: 68,
    Color.BLUE: 17,
    Color.RED: 34,
    Color.GREEN: 51,
}
"""Last normal square before each colour's final corridor."""

INIT_BOXES = {
    Color.YELLOW: 5,
    Color.BLUE: 22,
    Color.RED: 39,
    Color.GREEN: 56,
}
"""Square a piece of each colour enters on when it leaves home."""

BOARD_SIZE = 68
CORRIDOR_LENGTH = 8


def distance_to_goal(color: Color, box: Box) -> int:
    """Number of squares a piece of ``color`` on ``box`` still has to cover."""
    final = FINAL_BOXES[color]
    if box.type is BoxType.NORMAL:
        if box.num > final:
            return BOARD_SIZE - box.num + final + CORRIDOR_LENGTH
        return final - box.num + CORRIDOR_LENGTH
    if box.type is BoxType.GOAL:
        return 0
    if box.type is BoxType.FINAL_QUEUE:
        return CORRIDOR_LENGTH - box.num
    if box.type is BoxType.HOME:
        return 1 + 65 + CORRIDOR_LENGTH
    return -1


def _as_normal(box: Box) -> Box:
    if box.type in (BoxType.GOAL, BoxType.FINAL_QUEUE):
        return Box(FINAL_BOXES[box.col], BoxType.NORMAL, Color.NONE)
    if box.type is BoxType.HOME:
        return Box(INIT_BOXES[box.col], BoxType.NORMAL, Color.NONE)
    return box


def distance_box_to_box(color: Color, box1: Box, box2: Box) -> int:
    """Squares a piece of ``color`` must cover from ``box1`` to ``box2``; -1 if unreachable."""
    ref2 = _as_normal(box2)
    ref1 = _as_normal(box1)

    if box2.type is not BoxType.NORMAL and color != box2.col:
        return -1

    final = FINAL_BOXES[color]
    if ref1.num <= final < ref2.num:
        return -1
    if ref1.num > ref2.num and ref1.num <= final:
        return -1
    if ref1.num > ref2.num and final < ref2.num:
        return -1

    if ref2.num >= ref1.num:
        distance = ref2.num - ref1.num
    else:
        distance = BOARD_SIZE - box1.num + box2.num

    if box1.type is BoxType.HOME:
        distance += 1
    elif box1.type is BoxType.FINAL_QUEUE:
        distance -= box1.num
    elif box1.type is BoxType.GOAL:
        distance -= CORRIDOR_LENGTH

    if box2.type is BoxType.HOME:
        distance -= 1
    elif box2.type is BoxType.FINAL_QUEUE:
        distance += box2.num
    elif box2.type is BoxType.GOAL:
        distance += CORRIDOR_LENGTH

    return -1 if distance < 0 else distance


def _back_from_entry(final: int, steps: int) -> Box:
    if final - steps > 0:
        return Box(final - steps, BoxType.NORMAL, Color.NONE)
    return Box(BOARD_SIZE - (steps - final), BoxType.NORMAL, Color.NONE)


def compute_reverse_move(piece: Piece, dice_number: int) -> Box:
    """Square the piece would have come from had it moved ``dice_number`` squares."""
    color = piece.color
    box = piece.box

    if box.type is BoxType.GOAL:
        if 0 < dice_number <= 7:
            return Box(CORRIDOR_LENGTH - dice_number, BoxType.FINAL_QUEUE, color)
        if dice_number == 0:
            return Box(0, BoxType.GOAL, color)
        return _back_from_entry(FINAL_BOXES[color], dice_number - CORRIDOR_LENGTH)
    if box.type is BoxType.FINAL_QUEUE:
        if dice_number < box.num:
            return Box(box.num - dice_number, BoxType.FINAL_QUEUE, color)
        return _back_from_entry(FINAL_BOXES[color], dice_number - box.num)
    if box.type is BoxType.HOME:
        return box
    if box.num - dice_number > 0:
        return Box(box.num - dice_number, BoxType.NORMAL, Color.NONE)
    return Box(BOARD_SIZE - (dice_number - box.num), BoxType.NORMAL, Color.NONE)