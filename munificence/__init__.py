"""Colour sets, tokens, markets, a skill registry and payment search for a board game."""

__version__ = "0.1.0"