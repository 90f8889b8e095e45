"""Counting of generated and evaluated search nodes, with a time budget."""

from __future__ import annotations

import time
from typing import Callable

_RED = "\033[1;31m"
_YELLOW = "\033[1;33m"
_GREEN = "\033[1;32m"
_WHITE = "\033[1;37m"
_RESET = "\033[0m"


class NodeCounter:
    """Tracks how many nodes a search produced and how long it took."""

    MAX_TIME = 60.0
    TIME_MARGIN = 1.0

    def __init__(
        self,
        max_nodes: int = 1_000_000,
        node_margin: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_nodes = max_nodes
        self.node_margin = node_margin
        self._clock = clock
        self.generated = 0
        self.evaluated = 0
        self.time = 0.0
        self.running = False
        self._start = 0.0

    def increment_generated(self, n: int = 1) -> None:
        self.generated += n

    def increment_evaluated(self, n: int = 1) -> None:
        self.evaluated += n

    def reset(self) -> None:
        self.generated = 0
        self.evaluated = 0
        self.time = 0.0
        self.running = False

    @property
    def total(self) -> int:
        return self.generated + self.evaluated

    def limit_reached(self) -> bool:
        return self.node_limit_reached() or self.time_limit_reached()

    def node_limit_reached(self) -> bool:
        return self.total >= self.max_nodes

    def time_limit_reached(self) -> bool:
        return self.time >= self.MAX_TIME

    def start_timer(self) -> None:
        if not self.running:
            self._start = self._clock()
            self.running = True

    def stop_timer(self) -> None:
        if self.running:
            self.time += self._clock() - self._start
            self.running = False

    def limit_exceeded(self) -> bool:
        return self.node_limit_exceeded() or self.time_exceeded()

    def node_limit_exceeded(self) -> bool:
        return self.total >= self.max_nodes + self.node_margin

    def time_exceeded(self) -> bool:
        return self.time >= self.MAX_TIME + self.TIME_MARGIN

    def report(self) -> str:
        """Coloured summary of the counters, one line per figure."""
        if self.limit_exceeded():
            limit_col = _RED
        elif self.limit_reached():
            limit_col = _YELLOW
        else:
            limit_col = _GREEN
        if self.time_exceeded():
            time_col = _RED
        elif self.time_limit_reached():
            time_col = _YELLOW
        else:
            time_col = _GREEN
        lines = [
            f"{_WHITE}Nodos generados: {self.generated}{_RESET}",
            f"{_WHITE}Nodos evaluados: {self.evaluated}{_RESET}",
            f"{limit_col}Total de nodos: {self.total}{_RESET}",
            f"{time_col}Tiempo de generación+evaluación: {self.time:g}{_RESET}",
        ]
        return "\n".join(lines) + "\n"


_instance: NodeCounter | None = None


def get_node_counter() -> NodeCounter:
    """Return the process-wide counter, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = NodeCounter()
    return _instance