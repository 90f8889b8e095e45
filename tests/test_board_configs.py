import pytest

from parchisgame.board_configs import BoardConfig, pieces_for_config
from parchisgame.pieces import Box, BoxType, Color, SpecialType


def _nums(pieces):
    return [p.box.num for p in pieces]


def test_grouped_positions():
    pieces = pieces_for_config(BoardConfig.GROUPED)
    assert _nums(pieces[Color.GREEN]) == [55, 64, 68]
    assert _nums(pieces[Color.RED]) == [38, 47, 51]
    assert _nums(pieces[Color.BLUE]) == [21, 30, 34]
    assert _nums(pieces[Color.YELLOW]) == [4, 13, 17]


def test_grouped2_has_two_pieces_each():
    pieces = pieces_for_config(BoardConfig.GROUPED2)
    assert _nums(pieces[Color.YELLOW]) == [4, 13]
    assert all(len(v) == 2 for v in pieces.values())


def test_keys_in_colour_order():
    pieces = pieces_for_config(BoardConfig.ALL_AT_HOME)
    assert list(pieces) == sorted(pieces)


@pytest.mark.parametrize(
    "config, kind", [(BoardConfig.ALL_AT_HOME, BoxType.HOME), (BoardConfig.ALL_AT_GOAL, BoxType.GOAL)]
)
def test_home_and_goal(config, kind):
    pieces = pieces_for_config(config)
    for color, group in pieces.items():
        assert len(group) == 4
        assert all(p.box == Box(0, kind, color) and p.color == color for p in group)


def test_draw_one_and_two():
    one = pieces_for_config(BoardConfig.DRAW_ONE_PIECE)
    two = pieces_for_config(BoardConfig.DRAW_TWO_PIECES)
    assert _nums(one[Color.YELLOW]) == list(range(1, 18))
    assert _nums(one[Color.GREEN])[-1] == 68
    for color in one:
        assert len(two[color]) == 2 * len(one[color])


def test_corridors():
    pieces = pieces_for_config(BoardConfig.CORRIDORS_ONE_PIECE)
    assert all(p.box.type is BoxType.FINAL_QUEUE and p.box.col == c for c, g in pieces.items() for p in g)
    assert _nums(pieces[Color.RED]) == list(range(1, 8))


def test_sizes_config_types():
    red = pieces_for_config(BoardConfig.TEST_SIZES)[Color.RED]
    assert [p.type for p in red] == [
        SpecialType.NORMAL, SpecialType.SMALL, SpecialType.SMALL, SpecialType.MEGA
    ]
    assert all(p.turns_left == 3 for p in red)


def test_legacy_starts_with_home_piece():
    pieces = pieces_for_config(BoardConfig.GROUPED_LEGACY)
    assert pieces[Color.BLUE][0].box == Box(0, BoxType.HOME, Color.BLUE)


@pytest.mark.parametrize("config", [BoardConfig.DEBUG, BoardConfig.ALTERNED, BoardConfig.ALMOST_GOAL])
def test_undefined_layouts_are_empty(config):
    assert pieces_for_config(config) == {}


def test_each_call_returns_fresh_pieces():
    first = pieces_for_config(BoardConfig.GROUPED)
    first[Color.RED][0].turns_left = 9
    assert pieces_for_config(BoardConfig.GROUPED)[Color.RED][0].turns_left == 0