"""Guarded evaluation of game states."""

from __future__ import annotations

from typing import Any, Callable

from .nodecounter import NodeCounter, get_node_counter

_CHEAT_MESSAGE = (
    "Intento de hacer trampas detectado. Se informará a los profesores de este incidente."
)


class CheatingDetected(RuntimeError):
    """An evaluation was started or stopped out of order."""


class Heuristic:
    """Scores a state with ``function`` and accounts each call in a node counter.

    The counter defaults to the shared one and may be replaced through
    the ``counter`` attribute.
    """

    def __init__(self, function: Callable[[Any, int], float]):
        self.function = function
        self.counter: NodeCounter = get_node_counter()
        self._started = True
        self._stopped = True

    def evaluate(self, state: Any, player: int) -> float:
        if not self._started or not self._stopped:
            raise CheatingDetected(_CHEAT_MESSAGE)
        self._started = False
        self._stopped = False
        self._start_evaluation()
        result = self.function(state, player)
        self._stop_evaluation()
        return result

    def _start_evaluation(self) -> None:
        if self._started:
            raise CheatingDetected(_CHEAT_MESSAGE)
        self.counter.increment_evaluated()
        self.counter.start_timer()
        self._started = True

    def _stop_evaluation(self) -> None:
        if not self._started or self._stopped:
            raise CheatingDetected(_CHEAT_MESSAGE)
        self.counter.stop_timer()
        self._stopped = True