import logging
from dataclasses import dataclass, field
from typing import ClassVar

from polysquare.core.exceptions import InvalidSquareError, SquareLookupError
from polysquare.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
SIZE = 5


def build_keyed_square(keyword: str) -> "KeyedSquare":
    """Build a 5x5 keyed square from a keyword. Never fails."""
    return KeyedSquare.from_keyword(keyword)


@dataclass(frozen=True)
class KeyedSquare:
    """
    Immutable 5x5 Polybius square with a precomputed coordinate index.

    The letter order is the deduplicated keyword followed by the remaining
    alphabet in ascending order, laid out row-major. Every square is a
    permutation of ALPHABET.

    Coordinates are 0-based (row, col) pairs.
    """

    letters: str
    keyword: str = ""
    _grid: tuple[tuple[str, ...], ...] = field(init=False, repr=False, compare=False)
    _index: dict[str, tuple[int, int]] = field(init=False, repr=False, compare=False)

    ALPHABET: ClassVar[str] = ALPHABET
    SIZE: ClassVar[int] = SIZE

    def __post_init__(self) -> None:
        if sorted(self.letters) != sorted(ALPHABET):
            raise InvalidSquareError(self.letters)

        grid = tuple(
            tuple(self.letters[row * SIZE:(row + 1) * SIZE])
            for row in range(SIZE)
        )
        index = {
            letter: (row, col)
            for row, line in enumerate(grid)
            for col, letter in enumerate(line)
        }
        object.__setattr__(self, "_grid", grid)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_keyword(cls, keyword: str) -> "KeyedSquare":
        """Normalize the keyword, dedupe it and fill with the rest of the alphabet."""
        normalized = TextNormalizer().normalize(keyword)

        # dict keeps first-occurrence order
        key_letters = "".join(dict.fromkeys(normalized))
        rest = "".join(c for c in ALPHABET if c not in key_letters)

        square = cls(letters=key_letters + rest, keyword=normalized)
        logger.debug("Built keyed square %s from keyword %r", square.letters, keyword)
        return square

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._grid

    def locate(self, symbol: str) -> tuple[int, int]:
        """Return the (row, col) of a symbol."""
        try:
            return self._index[symbol]
        except KeyError:
            raise SquareLookupError(symbol) from None

    def at(self, row: int, col: int) -> str:
        """Return the symbol at (row, col)."""
        return self._grid[row][col]
