from typing import Any, ClassVar

from polysquare.core.exceptions import InvalidCiphertextError
from polysquare.models.schemas import CipherFamily, CipherType, KeyMaterial
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.squares.keyed_square import KeyedSquare


@EngineRegistry.register
class ThreeSquareEngine(CipherEngine):
    """
    Three-Square cipher engine.

    Every plaintext digraph (a, b) becomes a ciphertext trigram. With a at
    (r1, c1) in square A and b at (r2, c2) in square B:

        first  = A[random row][c1]
        middle = C[r1][c2]
        last   = B[r2][random col]

    The middle letter carries r1 and c2, the outer letters carry c1 and r2.
    The random coordinates are discarded on decryption:

        c1 = column of first in A
        r1, c2 = position of middle in C
        r2 = row of last in B

    so every random draw decrypts to the same digraph.
    """

    name = "Three-Square Cipher"
    cipher_type = CipherType.THREE_SQUARE
    cipher_family = CipherFamily.POLYBIUS
    description = (
        "A digraph-to-trigram cipher using three keyed 5x5 squares. "
        "The middle letter encodes the cross coordinates through the third "
        "square; the outer letters are randomized along one coordinate."
    )
    randomized = True

    KEY_NAMES: ClassVar[tuple[str, ...]] = ("key1", "key2", "key3")

    def normalize_key(self, key: KeyMaterial) -> dict[str, Any]:
        """Accept ``{"key1", "key2", "key3"}`` or ``"key1,key2,key3"``."""
        return self._parse_keywords(key, self.KEY_NAMES)

    def _squares(self, key: dict[str, Any]) -> tuple[KeyedSquare, KeyedSquare, KeyedSquare]:
        return (
            KeyedSquare.from_keyword(key["key1"]),
            KeyedSquare.from_keyword(key["key2"]),
            KeyedSquare.from_keyword(key["key3"]),
        )

    def _encrypt(self, plaintext: str, key: dict[str, Any]) -> str:
        square_a, square_b, square_c = self._squares(key)
        size = KeyedSquare.SIZE

        result = []
        for first, second in self.splitter.split_digraphs(plaintext):
            row1, col1 = square_a.locate(first)
            row2, col2 = square_b.locate(second)
            result.append(square_a.at(self.rng.randrange(size), col1))
            result.append(square_c.at(row1, col2))
            result.append(square_b.at(row2, self.rng.randrange(size)))

        return "".join(result)

    def _decrypt(self, ciphertext: str, key: dict[str, Any]) -> str:
        if len(ciphertext) % 3 != 0:
            raise InvalidCiphertextError(
                "Three-square ciphertext length must be a multiple of 3",
                {"length": len(ciphertext)},
            )
        square_a, square_b, square_c = self._squares(key)

        result = []
        for first, middle, last in self.splitter.split_groups(ciphertext, 3):
            _, col1 = square_a.locate(first)
            row1, col2 = square_c.locate(middle)
            row2, _ = square_b.locate(last)
            result.append(square_a.at(row1, col1))
            result.append(square_b.at(row2, col2))

        return self.trimmer.trim("".join(result))

    def generate_random_key(self) -> dict[str, str]:
        """Generate random keywords for the three squares."""
        return {name: self._random_keyword() for name in self.KEY_NAMES}

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: KeyMaterial,
    ) -> str:
        """Generate human-readable explanation."""
        normalized = self.normalize_key(key)

        return (
            f"Three-Square cipher with keywords '{normalized['key1']}', "
            f"'{normalized['key2']}' and '{normalized['key3']}'. "
            f"Each plaintext digraph becomes a trigram: the middle letter comes from "
            f"the third square at the first letter's row and the second letter's "
            f"column, the outer letters keep one coordinate each and randomize the "
            f"other. {len(ciphertext) // 3} trigrams were processed."
        )
