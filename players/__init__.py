"""
Input sources for terminal Snake.

This module contains the player abstraction and the implementations
that deliver input events to the game.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KeyDecoder, decode_keys
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KeyDecoder',
    'RandomPlayer',
    'decode_keys',
]
