"""Base class for the participants of a game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Player(ABC):
    """A participant that perceives the game and makes moves in it."""

    def __init__(self, name: str, id: int = 0):
        self.name = name
        self.id = id
        self.game: Any = None
        self.player_id: int | None = None

    def perceive(self, game: Any) -> None:
        """Take note of the current game and which player is on turn."""
        self.game = game
        self.player_id = game.current_player

    @abstractmethod
    def move(self) -> bool:
        """Make a move in the perceived game; return False if none was made."""

    def ready_for_next_turn(self) -> bool:
        return True