"""Enumeration of the states reachable from a game in one move."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .nodecounter import get_node_counter
from .parchis import SKIP_TURN, Parchis
from .pieces import Color


@dataclass
class Child:
    """A successor state and the move that produced it."""

    state: Parchis
    color: Color
    piece_id: int
    dice_value: int


def generate_next_move_descending(
    game: Parchis, c_piece: Color, id_piece: int, dice: int
) -> tuple[Parchis, Color, int, int]:
    """Produce the move following ``(c_piece, id_piece, dice)``.

    ``dice`` is an index into the current player's available dice, which
    are tried from the last one down; pass ``(Color.NONE, -1, -1)`` to
    start. Returns the resulting state and the move's colour, piece and
    dice index. When no move is left, the returned state equals ``game``.
    """
    counter = get_node_counter()
    counter.increment_generated()
    counter.start_timer()

    main_color = game.current_main_color()
    current_dices = game.available_normal_dices(main_color)

    if dice == -1:
        dice = len(current_dices) - 1
    dice_value = current_dices[dice]

    while True:
        current_pieces = game.available_pieces(main_color, dice_value)
        change_dice = False
        check_skip = False

        if current_pieces:
            if id_piece == -1:
                c_piece, id_piece = current_pieces[0]
            else:
                for pos, candidate in enumerate(current_pieces):
                    if candidate == (c_piece, id_piece):
                        if pos == len(current_pieces) - 1:
                            check_skip = True
                        else:
                            c_piece, id_piece = current_pieces[pos + 1]
                        break
        else:
            check_skip = True

        if check_skip:
            if game.can_skip_turn(main_color, dice_value) and id_piece != SKIP_TURN:
                id_piece = SKIP_TURN
                c_piece = main_color
            else:
                change_dice = True

        if not change_dice:
            break
        if dice == 0:
            return game.copy(), c_piece, id_piece, dice
        dice -= 1
        dice_value = current_dices[dice]
        id_piece = -1

    next_state = game.copy()
    next_state.move_piece(c_piece, id_piece, dice_value)
    counter.stop_timer()
    return next_state, c_piece, id_piece, dice


def children(game: Parchis) -> Iterator[Child]:
    """Yield every successor of ``game``, highest dice index first."""
    parent = game.copy()
    c_piece, id_piece, dice = Color.NONE, -1, -1
    while True:
        state, c_piece, id_piece, dice = generate_next_move_descending(
            parent, c_piece, id_piece, dice
        )
        if state == parent:
            return
        dice_value = parent.available_normal_dices(parent.current_main_color())[dice]
        yield Child(state, c_piece, id_piece, dice_value)


def children_list(game: Parchis) -> list[Child]:
    """All successors of ``game`` as a list."""
    return list(children(game))