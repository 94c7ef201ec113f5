from typing import Any, ClassVar

from polysquare.core.exceptions import InvalidCiphertextError
from polysquare.models.schemas import CipherFamily, CipherType, KeyMaterial
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.squares.keyed_square import KeyedSquare


@EngineRegistry.register
class TwoSquareEngine(CipherEngine):
    """
    Two-Square (double Playfair) cipher engine.

    Two keyed squares, A and B, sit side by side. For each digraph the
    first letter is found in A and the second in B:

    - Different rows: take the opposite corners of the rectangle, reading
      the first output letter from B and the second from A.
    - Same row: the two letters are simply swapped.

    The rule undoes itself once the squares swap places, so decryption
    reuses it with A built from key2 and B from key1.
    """

    name = "Two-Square Cipher"
    cipher_type = CipherType.TWO_SQUARE
    cipher_family = CipherFamily.POLYBIUS
    description = (
        "A digraph substitution cipher using two keyed 5x5 squares. "
        "Letters on different rows are replaced by the opposite rectangle "
        "corners; letters on the same row are swapped."
    )

    KEY_NAMES: ClassVar[tuple[str, ...]] = ("key1", "key2")

    def normalize_key(self, key: KeyMaterial) -> dict[str, Any]:
        """Accept ``{"key1", "key2"}`` or ``"key1,key2"``."""
        return self._parse_keywords(key, self.KEY_NAMES)

    def _encrypt(self, plaintext: str, key: dict[str, Any]) -> str:
        digraphs = self.splitter.split_digraphs(plaintext)
        return self._substitute(digraphs, key["key1"], key["key2"])

    def _decrypt(self, ciphertext: str, key: dict[str, Any]) -> str:
        if len(ciphertext) % 2 != 0:
            raise InvalidCiphertextError(
                "Two-square ciphertext length must be even",
                {"length": len(ciphertext)},
            )
        digraphs = self.splitter.split_digraphs(ciphertext, pad=False)
        return self.trimmer.trim(self._substitute(digraphs, key["key2"], key["key1"]))

    def _substitute(self, digraphs: list[str], keyword_a: str, keyword_b: str) -> str:
        """Apply the two-square rule with square A seeded by keyword_a and B by keyword_b."""
        square_a = KeyedSquare.from_keyword(keyword_a)
        square_b = KeyedSquare.from_keyword(keyword_b)

        result = []
        for first, second in digraphs:
            row1, col1 = square_a.locate(first)
            row2, col2 = square_b.locate(second)

            if row1 == row2:
                result.append(second + first)
            else:
                result.append(square_b.at(row1, col2) + square_a.at(row2, col1))

        return "".join(result)

    def generate_random_key(self) -> dict[str, str]:
        """Generate random keywords for both squares."""
        return {
            "key1": self._random_keyword(),
            "key2": self._random_keyword(),
        }

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: KeyMaterial,
    ) -> str:
        """Generate human-readable explanation."""
        normalized = self.normalize_key(key)

        return (
            f"Two-Square cipher with keywords '{normalized['key1']}' and "
            f"'{normalized['key2']}'. Each digraph's first letter is found in the "
            f"first square and its second letter in the second square; letters on "
            f"different rows take the opposite rectangle corners, letters on the "
            f"same row are swapped. A trailing pad 'X' after a consonant is removed "
            f"on decryption."
        )
