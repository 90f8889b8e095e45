"""Driving a game: turns, timing of each move and end-of-game report."""

from __future__ import annotations

import time

from .nodecounter import get_node_counter
from .parchis import Parchis
from .pieces import Color

_POLL_SECONDS = 0.01

_RESET = "\033[0m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"
_YELLOW = "\033[1;33m"
_BLUE = "\033[1;34m"
_MAGENTA = "\033[1;35m"
_CYAN = "\033[1;36m"
_WHITE = "\033[1;37m"
_ORANGE = "\033[1;38;5;208m"

_TURN_COLORS = {
    Color.YELLOW: _YELLOW,
    Color.BLUE: _BLUE,
    Color.RED: _RED,
    Color.GREEN: _GREEN,
}


def _say(style: str, text: str) -> None:
    print(f"{style}{text}{_RESET}")


def game_loop(game: Parchis) -> None:
    """Play ``game`` to the end and announce the result."""
    for player in game.players:
        player.perceive(game)

    _say(_MAGENTA, "++++++++++++++++++++++++++++++++++++++")
    _say(_MAGENTA, "¡COMIENZA LA PARTIDA!")
    _say(_MAGENTA, f"Jugador 1: {game.players[0].name}")
    _say(_MAGENTA, f"Jugador 2: {game.players[1].name}")
    _say(_MAGENTA, "++++++++++++++++++++++++++++++++++++++")

    while not game.game_over():
        game_step(game)

    _say(_MAGENTA, "++++++++++++++++++++++++")
    _say(_MAGENTA, "La partida ha terminado")
    winner = game.winner()
    winner_color = game.color_winner()
    _say(_MAGENTA, f"Ha ganado el jugador {1 + winner} ({winner_color.name.lower()})")
    _say(_MAGENTA, f"¡¡¡ENHORABUENA, {game.players[winner].name}!!!")
    loser = 1 + (0 if winner == 1 else 1)
    if game.illegal_move():
        _say(_ORANGE, f"El jugador {loser} ha hecho un movimiento ilegal")
    if game.over_bounce():
        _say(_ORANGE, f"El jugador {loser} ha excedido el límite de rebotes.")
    if game.over_thought():
        _say(_ORANGE, f"El jugador {loser} ha explotado de tanto pensar.")
    _say(_MAGENTA, "++++++++++++++++++++++++")


def game_step(game: Parchis) -> bool:
    """Let the player on turn move, then notify everyone and wait for them."""
    style = _TURN_COLORS.get(game.current_color, _GREEN)
    _say(_CYAN, "----------------")
    _say(_CYAN, f"Turno: {game.turn}")
    current = game.current_player
    _say(style, f"Jugador actual: {current + 1} ({game.players[current].name})")
    _say(_CYAN, "----------------")

    counter = get_node_counter()
    counter.reset()
    start = time.perf_counter()
    game.players[current].move()
    elapsed = time.perf_counter() - start

    _say(_WHITE, "====================")
    print(counter.report(), end="")
    if counter.limit_exceeded():
        _say(_RED, "Me parece que te pasaste de pensar... :(")
        game.overthinked_player = current
    _say(_WHITE, "====================")
    _say(_WHITE, f"Tiempo de movimiento: {elapsed} segundos")

    for player in game.players:
        player.perceive(game)
    for viewer in game.viewers:
        viewer.perceive(game)

    wait_for_players(game)
    return True


def wait_for_players(game: Parchis) -> None:
    """Block until every player and viewer is ready for the next turn."""
    pending = list(game.players) + list(game.viewers)
    while True:
        pending = [p for p in pending if not p.ready_for_next_turn()]
        if not pending:
            return
        time.sleep(_POLL_SECONDS)