"""A player's power bar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PowerBar:
    """Power accumulated by a player, capped at ``MAX_POWER``."""

    power: int = 0

    MAX_POWER = 100

    def increase_power(self, amount: int) -> None:
        self.power = min(self.power + amount, self.MAX_POWER)

    def empty(self) -> None:
        self.power = 0