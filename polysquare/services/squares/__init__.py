"""Polybius square building blocks."""

from polysquare.services.squares.aux_table import AuxKeyTable
from polysquare.services.squares.keyed_square import ALPHABET, KeyedSquare, build_keyed_square

__all__ = [
    "ALPHABET",
    "AuxKeyTable",
    "KeyedSquare",
    "build_keyed_square",
]
