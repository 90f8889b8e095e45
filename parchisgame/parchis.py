"""The state of a game and the rules that change it."""

from __future__ import annotations

from typing import Any, Iterable

from . import geometry
from .board import Board
from .board_configs import BoardConfig
from .dice import YINYANG, Dice
from .geometry import BOARD_SIZE, FINAL_BOXES, INIT_BOXES
from .pieces import Box, BoxType, Color, Piece, SpecialType, partner_color
from .powerbar import PowerBar
from .queries import BoardQueries

SKIP_TURN = -9999
"""Piece id meaning the player passes the turn."""

MAX_BOUNCES = 30

_NEXT_COLOR = {
    Color.YELLOW: Color.BLUE,
    Color.BLUE: Color.RED,
    Color.RED: Color.GREEN,
    Color.GREEN: Color.YELLOW,
}
_PLAYER_OF = {Color.YELLOW: 0, Color.BLUE: 1, Color.RED: 1, Color.GREEN: 0}


def _truncated_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of ``value``."""
    return value % modulus if value >= 0 else -((-value) % modulus)


class Parchis(BoardQueries):
    """A two-player game of four colours: board, dice, power bars and turn state."""

    def __init__(
        self,
        config: BoardConfig | Board | None = None,
        dice: Dice | None = None,
        players: Iterable[Any] | None = None,
    ):
        if isinstance(config, Board):
            board = config.copy()
        else:
            board = Board(config if config is not None else BoardConfig.ALL_AT_HOME)
        super().__init__(board)
        self.dice = dice.copy() if dice is not None else Dice()
        self.players: list[Any] = list(players) if players is not None else []
        self.viewers: list[Any] = []

        self.last_dice = -1
        self.current_player = 0
        self.current_color = Color.YELLOW

        self.illegal_move_player = -1
        self.disconnected_player = -1
        self.overbounce_player = -1
        self.overthinked_player = -1

        self.goal_move = False
        self.eating_move = False
        self.goal_bounce = False
        self.remember_6 = False
        self.bananed = False

        self.red_shell_move = False
        self.blue_shell_move = False
        self.star_move = False
        self.bullet_move = False
        self.horn_move = False
        self.shock_move = False
        self.boo_move = False
        self.mega_mushroom_move = False
        self.mushroom_move = False
        self.banana_move = False

        self.turn = 1
        self.bounces = {color: 0 for color in geometry.GAME_COLORS}
        self.update_board = True
        self.update_dice = True
        self.last_acquired = None
        self.playground_mode = False

        self.power_bars = [PowerBar(), PowerBar()]
        self.last_moves: list[tuple[Color, int, Box, Box]] = []
        self.last_action: tuple[Color, int, int] | None = None
        self._eaten: tuple[Color, int] = (Color.NONE, 0)

        self.pieces_destroyed_by_star: list[tuple[Color, int]] = []
        self.pieces_crushed_by_megamushroom: list[tuple[Color, int]] = []
        self.pieces_destroyed_by_red_shell: list[tuple[Color, int]] = []
        self.pieces_destroyed_by_blue_shell: list[tuple[Color, int]] = []
        self.pieces_destroyed_by_horn: list[tuple[Color, int]] = []

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Parchis) and self.board == other.board and self.turn == other.turn

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Parchis":
        """Independent copy of the state; players and viewers are shared."""
        clone = object.__new__(Parchis)
        clone.__dict__.update(self.__dict__)
        clone.board = self.board.copy()
        clone.dice = self.dice.copy()
        clone.power_bars = [PowerBar(bar.power) for bar in self.power_bars]
        clone.bounces = dict(self.bounces)
        clone.last_moves = list(self.last_moves)
        clone.players = list(self.players)
        clone.viewers = list(self.viewers)
        for name in (
            "pieces_destroyed_by_star",
            "pieces_crushed_by_megamushroom",
            "pieces_destroyed_by_red_shell",
            "pieces_destroyed_by_blue_shell",
            "pieces_destroyed_by_horn",
        ):
            setattr(clone, name, list(getattr(self, name)))
        return clone

    # ----- accessors -------------------------------------------------------

    def player_colors(self, player: int) -> list[Color]:
        return [Color.YELLOW, Color.GREEN] if player == 0 else [Color.BLUE, Color.RED]

    def current_main_color(self) -> Color:
        """Colour the current player's dice are kept under."""
        return Color.YELLOW if self.current_player == 0 else Color.BLUE

    def available_normal_dices(self, color: Color) -> list[int]:
        if color not in (Color.YELLOW, Color.BLUE):
            color = partner_color(color)
        return list(self.dice.current(color))

    def power_bar(self, key: int | Color) -> PowerBar:
        """Power bar of a player, given by index or by colour."""
        if isinstance(key, Color):
            return self.power_bars[0] if key in (Color.YELLOW, Color.RED) else self.power_bars[1]
        return self.power_bars[key]

    def power(self, player: int) -> int:
        return self.power_bar(player).power

    # ----- rules -------------------------------------------------------------

    def available_pieces(self, color: Color, dice_number: int) -> list[tuple[Color, int]]:
        """Pieces of ``color`` and its partner that may legally move ``dice_number``."""
        result = []
        for col in (color, partner_color(color)):
            for idx, piece in enumerate(self.board.pieces_of(col)):
                if self.is_legal_move(piece, dice_number):
                    result.append((col, idx))
        return result

    def can_skip_turn(self, color: Color, dice_number: int) -> bool:
        return (
            self.dice.is_available(color, dice_number)
            and not self.available_pieces(color, dice_number)
            and not self.available_pieces(partner_color(color), dice_number)
        )

    def compute_move(self, piece: Piece, dice_number: int) -> Box:
        """Square ``piece`` would land on after spending ``dice_number``."""
        return self._compute_move(piece, dice_number)[0]

    def _compute_move(self, piece: Piece, dice_number: int) -> tuple[Box, bool]:
        color = piece.color
        box = piece.box
        bounce = False

        if dice_number >= 100:
            return box, bounce

        if dice_number == 6 and all(
            p.box.type is not BoxType.HOME for p in self.board.pieces_of(color)
        ):
            dice_number = 7
        if piece.type is SpecialType.STAR:
            dice_number += 2
        elif piece.type is SpecialType.SMALL:
            dice_number //= 2
        elif piece.type is SpecialType.BANANED:
            dice_number = 0

        steps = 1 if dice_number == YINYANG else dice_number * 2
        final = FINAL_BOXES[color]

        def into_corridor(count: int) -> Box:
            nonlocal bounce
            if count <= 7:
                return Box(count, BoxType.FINAL_QUEUE, color)
            if count == 8:
                return Box(0, BoxType.GOAL, color)
            bounce = True
            diff = 16 - count
            if diff > 0:
                return Box(diff, BoxType.FINAL_QUEUE, color)
            return Box(final + diff, BoxType.NORMAL, Color.NONE)

        if box.type is BoxType.HOME:
            target = Box(INIT_BOXES[color], BoxType.NORMAL, Color.NONE)
        elif box.type is BoxType.NORMAL and box.num <= final < box.num + steps:
            target = into_corridor(box.num + steps - final)
        elif (
            box.type is BoxType.NORMAL
            and box.num + steps > BOARD_SIZE
            and box.num + steps - BOARD_SIZE > final
        ):
            target = into_corridor(box.num + steps - BOARD_SIZE - final)
        elif box.type is BoxType.FINAL_QUEUE:
            target = into_corridor(box.num + steps)
        else:
            target = Box(1 + _truncated_mod(box.num + steps - 1, BOARD_SIZE))

        if target.num <= 0 and target.type is BoxType.NORMAL:
            target = Box(BOARD_SIZE + target.num)
        return target, bounce

    def is_legal_move(self, piece: Piece, dice_number: int) -> bool:
        color = piece.color
        box = piece.box

        if self.game_over():
            return False
        if color != self.current_color and color != partner_color(self.current_color):
            return False
        if not self.dice.is_available(color, dice_number):
            return False
        if self.eating_move and dice_number != 20:
            return False
        if self.goal_move and dice_number != 10:
            return False

        final_box = self.compute_move(piece, dice_number)
        on_board = (
            final_box.type not in (BoxType.GOAL, BoxType.HOME) and final_box != box
        )
        if box.type is BoxType.HOME and dice_number != 5:
            return False
        if box.type is BoxType.GOAL:
            return False
        if on_board:
            occupation = self.box_state(final_box)
            if len(occupation) == 2:
                if piece.type is not SpecialType.STAR:
                    return False
                if all(self.board.piece(c, i).type is SpecialType.STAR for c, i in occupation):
                    return False
            elif len(occupation) == 1:
                if self.board.piece(*occupation[0]).type is SpecialType.MEGA:
                    return False

        if any(wall != color for wall in self.any_wall(box, final_box)):
            return False

        if dice_number == 6:
            partner = partner_color(color)
            has_walls = any(
                self.is_wall(p.box) == color for p in self.board.pieces_of(color)
            ) or any(self.is_wall(p.box) == partner for p in self.board.pieces_of(partner))
            if has_walls and self.is_wall(box) != color:
                return False
        return True

    def move_piece(self, color: Color, piece: int, dice_number: int) -> None:
        """Play ``dice_number`` with a piece, or pass with ``SKIP_TURN``.

        An illegal move loses the game for the current player.
        """
        if self.game_over():
            return

        if piece == SKIP_TURN:
            if self.can_skip_turn(color, dice_number):
                self.eating_move = False
                self.goal_move = False
                self.remember_6 = dice_number == 6 or (
                    self.remember_6 and dice_number in (10, 20)
                )
                self.last_dice = dice_number
                self.last_moves.clear()
                if not self.playground_mode:
                    self.dice.remove_number(color, dice_number)
                self._next_turn()
                self.turn += 1
                self.last_action = (color, piece, dice_number)
            else:
                self.turn += 1
                self.illegal_move_player = self.current_player
                print("\033[1;31mILLEGALLY TRIED TO SKIP TURN\033[0m")
            return

        moving = self.board.piece(color, piece)
        piece_box = moving.box
        current_piece = Piece(moving.color, moving.box, moving.type, moving.turns_left)

        self.last_dice = dice_number
        self.last_moves.clear()

        if not self.is_legal_move(moving, dice_number):
            self.illegal_move_player = self.current_player
            return

        if dice_number < 100:
            final_box, self.goal_bounce = self._compute_move(current_piece, dice_number)
            self.eating_move = False
            self.goal_move = False
            self.remember_6 = dice_number == 6 or (self.remember_6 and dice_number in (10, 20))
            box_states = self.box_state(final_box)
            bar = self.power_bars[self.current_player]

            if current_piece.type is SpecialType.STAR:
                self._star_move(color, piece, current_piece, piece_box, final_box)
                bar.increase_power(dice_number)
            else:
                if box_states and box_states[0][0] != color:
                    victim = self.board.piece(*box_states[0])
                    if (
                        final_box.type is BoxType.NORMAL
                        and final_box.num not in geometry.SAFE_BOXES
                        and victim.type is not SpecialType.BOO
                        and current_piece.type
                        not in (SpecialType.BOO, SpecialType.SMALL, SpecialType.BANANED)
                    ):
                        self.eating_move = True
                        self._eaten = box_states[0]

                self.board.move_piece(color, piece, final_box)
                bar.increase_power(dice_number)

                if not self.goal_bounce:
                    self.last_moves.append((color, piece, piece_box, final_box))
                else:
                    goal = Box(0, BoxType.GOAL, color)
                    self.last_moves.append((color, piece, piece_box, goal))
                    self.last_moves.append((color, piece, goal, final_box))
                    self.bounces[color] += 1
                    if self.bounces[color] > MAX_BOUNCES:
                        self.overbounce_player = self.current_player

                if self.eating_move:
                    eaten_color, eaten_idx = box_states[0]
                    origin = self.board.piece(eaten_color, eaten_idx).box
                    home = Box(0, BoxType.HOME, eaten_color)
                    self.board.move_piece(eaten_color, eaten_idx, home)
                    self.last_moves.append((eaten_color, eaten_idx, origin, home))

            if final_box.type is BoxType.GOAL and not self.game_over():
                self.goal_move = True

            if not self.playground_mode:
                self.dice.remove_number(color, dice_number)

            if self.eating_move:
                bar.increase_power(15)
                self.dice.force_number(color, 20)
            if self.goal_move:
                self.dice.force_number(color, 10)
            if self.is_wall(final_box) is not Color.NONE:
                bar.increase_power(10)
            if self.is_safe_box(final_box):
                bar.increase_power(5)

        self._next_turn()
        self.turn += 1
        self.last_action = (color, piece, self.last_dice)

    def _star_move(
        self, color: Color, piece: int, current: Piece, piece_box: Box, final_box: Box
    ) -> None:
        self.star_move = True
        end = Box(0, BoxType.GOAL, current.color) if self.goal_bounce else final_box
        destroyed = self.all_pieces_between(piece_box, end)
        origin = current.box
        for victim_color, victim_idx in destroyed:
            victim = self.board.piece(victim_color, victim_idx)
            if victim_color != color and victim.type not in (SpecialType.BOO, SpecialType.STAR):
                self.last_moves.append((color, piece, origin, victim.box))
                origin = victim.box
                home = Box(0, BoxType.HOME, victim_color)
                self.board.move_piece(victim_color, victim_idx, home)
                self.last_moves.append((victim_color, victim_idx, origin, home))
        self.last_moves.append((color, piece, origin, final_box))
        self.pieces_destroyed_by_star = destroyed
        self.board.move_piece(color, piece, final_box)

    def _next_turn(self) -> None:
        for col in (self.current_color, partner_color(self.current_color)):
            for idx, piece in enumerate(self.board.pieces_of(col)):
                self.board.decrease_piece_turns_left(col, idx)
                if piece.turns_left == 0:
                    self.board.set_piece_type(col, idx, SpecialType.NORMAL)

        keeps_turn = (
            self.last_dice == 6 or self.eating_move or self.goal_move or self.remember_6
        )
        if not keeps_turn or self.bananed:
            self.current_color = _NEXT_COLOR[self.current_color]
            self.current_player = _PLAYER_OF[self.current_color]

    # ----- game flow ---------------------------------------------------------

    def add_viewer(self, viewer: Any) -> None:
        self.viewers.append(viewer)

    def game_over(self) -> bool:
        return self.winner() != -1

    def end_game(self) -> None:
        """Mark the current player as disconnected."""
        self.disconnected_player = self.current_player

    def winner(self) -> int:
        """Index of the winning player, or -1 while the game goes on."""
        for loser in (
            self.illegal_move_player,
            self.disconnected_player,
            self.overbounce_player,
            self.overthinked_player,
        ):
            if loser != -1:
                return 1 if loser == 0 else 0
        col = self.color_winner()
        if col in (Color.YELLOW, Color.RED):
            return 0
        if col in (Color.BLUE, Color.GREEN):
            return 1
        return -1

    def color_winner(self) -> Color:
        """Main colour of the player whose pieces are all at the goal."""
        for player in range(2):
            col1, col2 = self.player_colors(player)
            if all(
                self.pieces_at_goal(col) == len(self.board.pieces_of(col)) for col in (col1, col2)
            ):
                return col1
        return Color.NONE

    def illegal_move(self) -> bool:
        return self.illegal_move_player != -1

    def over_bounce(self) -> bool:
        return self.overbounce_player != -1

    def over_thought(self) -> bool:
        return self.overthinked_player != -1

    def set_playground_mode(self) -> None:
        """Switch to the playground board, where dice are never spent."""
        self.playground_mode = True
        self.board = Board(BoardConfig.PLAYGROUND)

    # ----- helpers for heuristics ------------------------------------------

    def distance_to_goal(self, color: Color, piece_id: int) -> int:
        return geometry.distance_to_goal(color, self.board.piece(color, piece_id).box)

    def distance_between_pieces(self, color1: Color, id1: int, color2: Color, id2: int) -> int:
        return geometry.distance_box_to_box(
            color1, self.board.piece(color1, id1).box, self.board.piece(color2, id2).box
        )

    def eaten_piece(self) -> tuple[Color, int]:
        return self._eaten if self.eating_move else (Color.NONE, 0)

    def pieces_destroyed_last_move(self) -> list[tuple[Color, int]]:
        for destroyed in (
            self.pieces_destroyed_by_star,
            self.pieces_crushed_by_megamushroom,
            self.pieces_destroyed_by_red_shell,
            self.pieces_destroyed_by_blue_shell,
            self.pieces_destroyed_by_horn,
        ):
            if destroyed:
                return list(destroyed)
        return []

    def is_normal_dice(self, dice: int) -> bool:
        return 1 <= dice <= 6