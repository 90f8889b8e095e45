"""Game model, rules, game loop and successor generation for a two-player Parchís variant."""

__version__ = "0.1.0"