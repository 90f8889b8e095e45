from parchisgame.board import Board, BoardTrap, TrapType
from parchisgame.board_configs import BoardConfig
from parchisgame.geometry import FINAL_BOXES
from parchisgame.pieces import Box, BoxType, Color, Piece, SpecialType
from parchisgame.queries import BoardQueries

COLORS = (Color.YELLOW, Color.BLUE, Color.RED, Color.GREEN)


def _queries(layout):
    pieces = {c: list(layout.get(c, [Piece(c, Box(0, BoxType.HOME, c))])) for c in COLORS}
    return BoardQueries(Board(pieces))


def test_box_state_finds_occupant():
    q = BoardQueries(Board(BoardConfig.GROUPED2))
    assert q.box_state(Box(55)) == [(Color.GREEN, 0)]
    assert q.box_state(Box(56)) == []


def test_home_and_goal_counts():
    q = BoardQueries(Board(BoardConfig.ALL_AT_HOME))
    for color in COLORS:
        assert q.pieces_at_home(color) == 4
        assert q.pieces_at_goal(color) == 0


def test_safe_boxes():
    q = BoardQueries(Board())
    assert q.is_safe_box(Box(4))
    assert not q.is_safe_box(Box(5))
    assert not q.is_safe_box(Box(4, BoxType.FINAL_QUEUE, Color.YELLOW))


def test_safe_piece():
    q = BoardQueries(Board(BoardConfig.GROUPED2))
    assert q.is_safe_piece(Color.YELLOW, 0)


def test_wall_of_same_colour():
    q = _queries({Color.BLUE: [Piece(Color.BLUE, Box(10)), Piece(Color.BLUE, Box(10))]})
    assert q.is_wall(Box(10)) is Color.BLUE


def test_mixed_colours_make_no_wall():
    q = _queries(
        {
            Color.BLUE: [Piece(Color.BLUE, Box(10))],
            Color.RED: [Piece(Color.RED, Box(10))],
        }
    )
    assert q.is_wall(Box(10)) is Color.NONE


def test_small_piece_breaks_wall():
    q = _queries(
        {
            Color.BLUE: [
                Piece(Color.BLUE, Box(10)),
                Piece(Color.BLUE, Box(10), SpecialType.SMALL, 3),
            ]
        }
    )
    assert q.is_wall(Box(10)) is Color.NONE


def test_home_is_never_a_wall():
    q = BoardQueries(Board(BoardConfig.ALL_AT_HOME))
    assert q.is_wall(Box(0, BoxType.HOME, Color.YELLOW)) is Color.NONE


def test_any_wall_on_path_and_off_path():
    q = _queries({Color.BLUE: [Piece(Color.BLUE, Box(10)), Piece(Color.BLUE, Box(10))]})
    assert q.any_wall(Box(8), Box(12)) == [Color.BLUE]
    assert q.any_wall(Box(11), Box(15)) == []


def test_any_wall_wraps_around_board():
    q = _queries({Color.RED: [Piece(Color.RED, Box(2)), Piece(Color.RED, Box(2))]})
    assert q.any_wall(Box(67), Box(3)) == [Color.RED]


def test_any_wall_from_home_is_empty():
    q = _queries({Color.RED: [Piece(Color.RED, Box(2)), Piece(Color.RED, Box(2))]})
    assert q.any_wall(Box(0, BoxType.HOME, Color.YELLOW), Box(5)) == []


def test_corridor_destination_ends_at_entry_square():
    entry = FINAL_BOXES[Color.YELLOW]
    q = _queries({Color.BLUE: [Piece(Color.BLUE, Box(entry)), Piece(Color.BLUE, Box(entry))]})
    target = Box(3, BoxType.FINAL_QUEUE, Color.YELLOW)
    assert q.any_wall(Box(entry - 3), target) == [Color.BLUE]


def test_mega_wall():
    q = _queries({Color.GREEN: [Piece(Color.GREEN, Box(30), SpecialType.MEGA, 3)]})
    assert q.is_mega_wall(Box(30)) is Color.GREEN
    assert q.any_mega_wall(Box(28), Box(31)) == [Color.GREEN]
    assert q.any_mega_wall(Box(31), Box(33)) == []


def test_any_trap():
    q = _queries({})
    q.board.add_trap(TrapType.BANANA, Box(10))
    assert q.any_trap(Box(8), Box(12)) == [BoardTrap(TrapType.BANANA, Box(10))]
    assert q.any_trap(Box(10), Box(12)) == []


def test_all_pieces_between_includes_destination_not_origin():
    q = _queries(
        {
            Color.YELLOW: [Piece(Color.YELLOW, Box(8))],
            Color.BLUE: [Piece(Color.BLUE, Box(10))],
            Color.RED: [Piece(Color.RED, Box(12))],
        }
    )
    assert q.all_pieces_between(Box(8), Box(12)) == [(Color.BLUE, 0), (Color.RED, 0)]