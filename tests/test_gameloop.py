from parchisgame.board_configs import BoardConfig
from parchisgame.gameloop import game_loop, game_step, wait_for_players
from parchisgame.nodecounter import get_node_counter
from parchisgame.parchis import Parchis
from parchisgame.player import Player


class ScriptedPlayer(Player):
    def __init__(self, name, action=None, ready_after=1):
        super().__init__(name)
        self.action = action
        self.moves = 0
        self.perceived = 0
        self.ready_calls = 0
        self.ready_after = ready_after

    def perceive(self, game):
        super().perceive(game)
        self.perceived += 1

    def move(self):
        self.moves += 1
        if self.action is not None:
            self.action(self.game)
        return True

    def ready_for_next_turn(self):
        self.ready_calls += 1
        return self.ready_calls >= self.ready_after


def _game(p0, p1, config=BoardConfig.GROUPED2):
    game = Parchis(config, players=[p0, p1])
    for p in (p0, p1):
        p.perceive(game)
    return game


def test_wait_for_players_polls_until_ready():
    slow = ScriptedPlayer("slow", ready_after=3)
    fast = ScriptedPlayer("fast")
    viewer = ScriptedPlayer("viewer", ready_after=2)
    game = _game(slow, fast)
    game.add_viewer(viewer)
    wait_for_players(game)
    assert slow.ready_calls == 3
    assert fast.ready_calls == 1
    assert viewer.ready_calls == 2


def test_game_step_moves_current_player_and_notifies_all():
    p0 = ScriptedPlayer("Ana", action=lambda g: g.end_game())
    p1 = ScriptedPlayer("Bea")
    viewer = ScriptedPlayer("viewer")
    game = _game(p0, p1)
    game.add_viewer(viewer)
    assert game_step(game) is True
    assert p0.moves == 1
    assert p1.moves == 0
    assert viewer.perceived == 1
    assert p1.game is game
    assert p1.player_id == game.current_player
    assert game.winner() == 1


def test_game_step_marks_overthinking_player():
    def overthink(game):
        counter = get_node_counter()
        counter.increment_generated(counter.max_nodes + counter.node_margin)

    p0 = ScriptedPlayer("Ana", action=overthink)
    p1 = ScriptedPlayer("Bea")
    game = _game(p0, p1)
    game_step(game)
    assert game.overthinked_player == 0
    assert game.over_thought()
    assert game.winner() == 1
    get_node_counter().reset()


def test_game_loop_finished_game_makes_no_moves(capsys):
    p0 = ScriptedPlayer("Ana")
    p1 = ScriptedPlayer("Bea")
    game = Parchis(BoardConfig.ALL_AT_GOAL, players=[p0, p1])
    game_loop(game)
    out = capsys.readouterr().out
    assert p0.moves == 0 and p1.moves == 0
    assert p0.perceived == 1
    assert "¡¡¡ENHORABUENA, Ana!!!" in out
    assert "Ha ganado el jugador 1" in out


def test_game_loop_reports_illegal_move(capsys):
    def illegal(game):
        # Green piece 0 is not the current colour's partner for player 1.
        game.move_piece(game.current_color, 0, 99)

    p0 = ScriptedPlayer("Ana", action=illegal)
    p1 = ScriptedPlayer("Bea")
    game = Parchis(BoardConfig.GROUPED2, players=[p0, p1])
    game_loop(game)
    out = capsys.readouterr().out
    assert game.illegal_move()
    assert game.winner() == 1
    assert "¡¡¡ENHORABUENA, Bea!!!" in out
    assert "ha hecho un movimiento ilegal" in out