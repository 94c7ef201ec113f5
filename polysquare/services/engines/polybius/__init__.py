"""Polybius-square cipher engines."""

from polysquare.services.engines.polybius.checkerboard import CheckerboardEngine
from polysquare.services.engines.polybius.two_square import TwoSquareEngine
from polysquare.services.engines.polybius.three_square import ThreeSquareEngine

__all__ = [
    "CheckerboardEngine",
    "TwoSquareEngine",
    "ThreeSquareEngine",
]
