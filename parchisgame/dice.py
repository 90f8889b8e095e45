"""The players' dice: the numbers each player may still spend."""

from __future__ import annotations

import copy as _copy
from typing import Mapping

from .pieces import Color, partner_color

YINYANG = 30
"""Special die face that moves a piece a single square."""

DEFAULT_FACES = (1, 2, 4, 5, 6, YINYANG)


def _owner(color: Color) -> Color:
    if color not in (Color.YELLOW, Color.BLUE):
        return partner_color(color)
    return color


class Dice:
    """Layered dice per player, keyed by the player's main colour.

    The first layer holds the regular numbers; a forced number (a bonus
    after eating or reaching the goal) is pushed as an extra layer.
    """

    def __init__(self, layers: Mapping[Color, list[list[int]]] | None = None):
        if layers is None:
            layers = {Color.BLUE: [list(DEFAULT_FACES)], Color.YELLOW: [list(DEFAULT_FACES)]}
        self.layers: dict[Color, list[list[int]]] = {
            color: [list(layer) for layer in stack] for color, stack in layers.items()
        }

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Dice) and self.layers == other.layers

    def __repr__(self) -> str:
        return f"Dice({self.layers!r})"

    def current(self, color: Color) -> list[int]:
        """Numbers the player can use now."""
        stack = self.layers[color]
        return stack[-1] if len(stack) == 2 else stack[0]

    def all_layers(self, color: Color) -> list[list[int]]:
        return self.layers[color]

    def layers_size(self, color: Color) -> int:
        return len(self.layers[color])

    def remove_number(self, color: Color, number: int) -> None:
        """Spend ``number``; an emptied regular layer is refilled."""
        color = _owner(color)
        stack = self.layers[color]
        if len(stack) == 2:
            stack[-1] = [n for n in stack[-1] if n != number]
            if not stack[-1]:
                stack.pop()
        else:
            stack[0] = [n for n in stack[0] if n != number]
            if not stack[0]:
                self.reset_dice(color)

    def reset_dice(self, color: Color, new_dice=DEFAULT_FACES) -> None:
        self.layers[color][0] = list(new_dice)

    def is_available(self, color: Color, number: int) -> bool:
        color = _owner(color)
        stack = self.layers[color]
        layer = stack[-1] if len(stack) == 2 else stack[0]
        return number in layer

    def add_number(self, color: Color, number: int) -> None:
        self.layers[_owner(color)][0].append(number)

    def force_number(self, color: Color, number: int) -> None:
        """Push a layer holding only ``number``."""
        self.layers[_owner(color)].append([number])

    def copy(self) -> "Dice":
        return Dice(_copy.deepcopy(self.layers))