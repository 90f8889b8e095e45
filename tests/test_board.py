import pytest

from parchisgame.board import Board, BoardTrap, TrapType
from parchisgame.board_configs import BoardConfig, pieces_for_config
from parchisgame.pieces import Box, BoxType, Color, Piece, SpecialType


def test_default_board_has_everything_at_home():
    board = Board()
    for color in (Color.YELLOW, Color.BLUE, Color.RED, Color.GREEN):
        assert len(board.pieces_of(color)) == 4
        assert all(p.box == Box(0, BoxType.HOME, color) for p in board.pieces_of(color))


def test_config_matches_configured_pieces():
    board = Board(BoardConfig.GROUPED)
    assert board.pieces == pieces_for_config(BoardConfig.GROUPED)
    assert board.piece(Color.YELLOW, 0).box == Box(4)


def test_board_from_mapping_is_independent_copy():
    source = {Color.BLUE: [Piece(Color.BLUE, Box(10))]}
    board = Board(source)
    board.move_piece(Color.BLUE, 0, Box(12))
    assert source[Color.BLUE][0].box == Box(10)
    assert board.piece(Color.BLUE, 0).box == Box(12)


def test_missing_colour_raises():
    board = Board({Color.BLUE: [Piece(Color.BLUE, Box(10))]})
    with pytest.raises(KeyError):
        board.pieces_of(Color.RED)


def test_move_piece():
    board = Board()
    target = Box(22)
    board.move_piece(Color.BLUE, 2, target)
    assert board.piece(Color.BLUE, 2).box == target
    assert board.piece(Color.BLUE, 1).box == Box(0, BoxType.HOME, Color.BLUE)


def test_piece_type_and_turns():
    board = Board()
    board.set_piece_type(Color.RED, 1, SpecialType.STAR)
    board.set_piece_turns_left(Color.RED, 1, 2)
    assert board.piece(Color.RED, 1).type is SpecialType.STAR
    board.decrease_piece_turns_left(Color.RED, 1)
    assert board.piece(Color.RED, 1).turns_left == 1
    board.decrease_piece_turns_left(Color.RED, 1)
    board.decrease_piece_turns_left(Color.RED, 1)
    assert board.piece(Color.RED, 1).turns_left == 0


def test_traps_add_and_delete():
    board = Board()
    board.add_trap(TrapType.BANANA, Box(7))
    board.add_trap(TrapType.BANANA, Box(9))
    assert board.traps == [BoardTrap(TrapType.BANANA, Box(7)), BoardTrap(TrapType.BANANA, Box(9))]
    board.delete_trap(Box(7))
    assert board.traps == [BoardTrap(TrapType.BANANA, Box(9))]


def test_delete_missing_trap_raises():
    board = Board()
    with pytest.raises(ValueError):
        board.delete_trap(Box(3))


def test_delete_special_item():
    board = Board()
    board.special_items.extend(["a", "b", "c"])
    board.delete_special_item(1)
    assert board.special_items == ["a", "c"]


def test_copy_is_equal_and_independent():
    board = Board(BoardConfig.GROUPED2)
    board.add_trap(TrapType.BANANA, Box(5))
    clone = board.copy()
    assert clone == board
    assert clone.traps == board.traps
    clone.move_piece(Color.GREEN, 0, Box(60))
    assert clone != board
    assert board.piece(Color.GREEN, 0).box == Box(55)


def test_equality_compares_pieces():
    assert Board(BoardConfig.GROUPED) == Board(BoardConfig.GROUPED)
    assert Board(BoardConfig.GROUPED) != Board(BoardConfig.ALL_AT_HOME)